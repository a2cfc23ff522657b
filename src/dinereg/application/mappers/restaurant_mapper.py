from __future__ import annotations

from dinereg.application.dto.responses import RestaurantResponse
from dinereg.domain.restaurant.entities import Restaurant


def to_restaurant_response(restaurant: Restaurant) -> RestaurantResponse:
    return RestaurantResponse(
        restaurantId=int(restaurant.restaurant_id),
        name=restaurant.name,
        slug=restaurant.slug,
        phone=restaurant.phone,
        email=restaurant.email,
        address=restaurant.address,
        serviceChargePct=restaurant.service_charge_pct,
        gstNo=restaurant.gst_no,
        languages=list(restaurant.languages) if restaurant.languages is not None else None,
        isActive=restaurant.is_active,
        createdAt=restaurant.created_at,
        updatedAt=restaurant.updated_at,
    )
