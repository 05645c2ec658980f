"""Editable static seed data: floor plan rules, menu, orders and marketing copy."""

from __future__ import annotations

SEAT_ROWS: list[str] = ["A", "B", "C", "D", "E"]

SEATS_PER_ROW: dict[str, int] = {"A": 5, "B": 5, "C": 5, "D": 4, "E": 3}

BOOTH_ROWS: set[str] = {"E"}

# Seats numbered up to this are pair tables; the rest of a non-booth row are quad tables.
PAIR_TABLE_MAX_NUMBER = 2

# Initial status of seat n in row index r is SEAT_STATUS_CYCLE[(r + n) % len(SEAT_STATUS_CYCLE)].
SEAT_STATUS_CYCLE: list[str] = ["reserved", "available", "occupied", "available"]

TABLE_CAPACITY: dict[str, int] = {
    "table-2": 2,
    "table-4": 4,
    "table-6": 6,
    "booth": 6,
}

_IMAGE_URL = "https://images.unsplash.com/photo-{seed}?w=300&h=200&fit=crop"


def _img(seed: str) -> str:
    return _IMAGE_URL.format(seed=seed)


MENU_CATALOG: list[dict] = [
    {
        "name": "Breakfast",
        "icon": "☀️",
        "subcategories": [
            {
                "name": "Dosa Items",
                "items": [
                    {"id": "b1", "name": "Masala Dosa", "price": 120, "image": _img("1630383249824-d4e59b8c3a45"), "available": True, "prep_time": 15, "is_veg": True, "description": "Crispy crepe with spiced potato filling"},
                    {"id": "b2", "name": "Rava Dosa", "price": 140, "image": _img("1668236543090-c0cb8f82a781"), "available": True, "prep_time": 12, "is_veg": True, "description": "Semolina crepe, crispy and lacy"},
                ],
            },
            {
                "name": "Idli Items",
                "items": [
                    {"id": "b3", "name": "Steamed Idli", "price": 80, "image": _img("1589301760435-2d423b4b4c45"), "available": True, "prep_time": 10, "is_veg": True, "description": "Soft steamed rice cakes with sambar"},
                ],
            },
        ],
    },
    {
        "name": "Lunch",
        "icon": "🍛",
        "subcategories": [
            {
                "name": "North Indian",
                "items": [
                    {"id": "l1", "name": "Butter Chicken", "price": 320, "image": _img("1603894584373-5ac82b2ae398"), "available": True, "prep_time": 25, "is_veg": False, "description": "Tender chicken in rich tomato cream"},
                    {"id": "l2", "name": "Paneer Tikka Masala", "price": 280, "image": _img("1631452180519-c014fe39b323"), "available": True, "prep_time": 20, "is_veg": True, "description": "Grilled paneer in spiced gravy"},
                    {"id": "l3", "name": "Dal Makhani", "price": 220, "image": _img("1546833999-4e3a1a0a3d4e"), "available": False, "prep_time": 30, "is_veg": True, "description": "Slow-cooked black lentils"},
                ],
            },
            {
                "name": "South Indian",
                "items": [
                    {"id": "l4", "name": "Chettinad Chicken", "price": 340, "image": _img("1610057099443-fde6c5282196"), "available": True, "prep_time": 30, "is_veg": False, "description": "Fiery pepper chicken curry"},
                ],
            },
            {
                "name": "Chinese",
                "items": [
                    {"id": "l5", "name": "Hakka Noodles", "price": 200, "image": _img("1585032226651-759b368d7246"), "available": True, "prep_time": 15, "is_veg": True, "description": "Stir-fried noodles with vegetables"},
                    {"id": "l6", "name": "Chilli Chicken", "price": 260, "image": _img("1525755662015-2b6de8cb6d13"), "available": True, "prep_time": 20, "is_veg": False, "description": "Crispy chicken tossed in spicy sauce"},
                ],
            },
        ],
    },
    {
        "name": "Dinner",
        "icon": "🌙",
        "subcategories": [
            {
                "name": "Grills & Kebabs",
                "items": [
                    {"id": "d1", "name": "Tandoori Platter", "price": 450, "image": _img("1599487488170-d11ec9c172f0"), "available": True, "prep_time": 35, "is_veg": False, "description": "Assorted tandoori meats and paneer"},
                    {"id": "d2", "name": "Seekh Kebab", "price": 320, "image": _img("1606471191009-63994b4a1e13"), "available": True, "prep_time": 25, "is_veg": False, "description": "Minced meat skewers, charcoal grilled"},
                ],
            },
        ],
    },
    {
        "name": "Beverages",
        "icon": "🥤",
        "subcategories": [
            {
                "name": "Hot Drinks",
                "items": [
                    {"id": "v1", "name": "Masala Chai", "price": 60, "image": _img("1571934811356-4b5ab9e02c4a"), "available": True, "prep_time": 5, "is_veg": True, "description": "Traditional spiced Indian tea"},
                    {"id": "v2", "name": "Filter Coffee", "price": 80, "image": _img("1509042239860-f550ce710b93"), "available": True, "prep_time": 5, "is_veg": True, "description": "South Indian style decoction coffee"},
                ],
            },
            {
                "name": "Cold Drinks",
                "items": [
                    {"id": "v3", "name": "Mango Lassi", "price": 120, "image": _img("1553530666-ba11a7da3888"), "available": True, "prep_time": 5, "is_veg": True, "description": "Creamy mango yogurt smoothie"},
                ],
            },
        ],
    },
]

# Lines are (item id, quantity); times are 24h "HH:MM".
SEED_ORDERS: list[dict] = [
    {
        "id": "ORD-001",
        "customer_name": "Rahul Sharma",
        "seat_id": "A1",
        "lines": [("l1", 1), ("v1", 2)],
        "status": "cook-now",
        "time": "12:30",
    },
    {
        "id": "ORD-002",
        "customer_name": "Priya Patel",
        "seat_id": "B3",
        "lines": [("l2", 1)],
        "status": "preparing",
        "time": "12:45",
    },
    {
        "id": "ORD-003",
        "customer_name": "Amit Kumar",
        "seat_id": "C2",
        "lines": [("b1", 2), ("v3", 1)],
        "status": "pending",
        "time": "13:00",
    },
]

ANALYTICS_HEADLINES: list[dict[str, str]] = [
    {"label": "Today's Revenue", "value": "₹24,500", "change": "+12%"},
    {"label": "Bookings Today", "value": "47", "change": "+8%"},
    {"label": "Orders Served", "value": "38", "change": "+15%"},
]

TOP_DISHES: list[dict[str, str | int]] = [
    {"name": "Butter Chicken", "orders": 18, "revenue": 5760},
    {"name": "Masala Dosa", "orders": 15, "revenue": 1800},
    {"name": "Paneer Tikka Masala", "orders": 12, "revenue": 3360},
    {"name": "Hakka Noodles", "orders": 10, "revenue": 2000},
]

LANDING_STATS: list[tuple[str, str]] = [
    ("10K+", "Happy Diners"),
    ("50+", "Restaurants"),
    ("4.9", "Average Rating"),
    ("<2min", "Booking Time"),
]

LANDING_FEATURES: list[dict[str, str]] = [
    {
        "emoji": "💺",
        "title": "Real-Time Seat Booking",
        "description": "See live seat availability and book instantly, like choosing your movie seat.",
    },
    {
        "emoji": "🍽️",
        "title": "Pre-Order Your Meal",
        "description": "Browse the full menu, add items to cart, and order before you even arrive.",
    },
    {
        "emoji": "👨‍🍳",
        "title": "Cook on Arrival",
        "description": "Your food is prepared fresh only when you confirm. No stale dishes.",
    },
    {
        "emoji": "🎁",
        "title": "Loyalty & Rewards",
        "description": "Earn points, unlock vouchers, and enjoy exclusive offers on every visit.",
    },
]
