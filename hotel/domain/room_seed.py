from hotel.domain.models import Room

_UNSPLASH = "https://images.unsplash.com/photo-{}?q=80&w={}&auto=format&fit=crop"

SEED_ROOMS = [
    ("101", "Standard Room", 120.00, _UNSPLASH.format("1566665797739-1674de7a421a", 2874)),
    ("102", "Standard Room", 120.00, _UNSPLASH.format("1598605272254-16f0c0ecdfa5", 2874)),
    ("201", "Deluxe Room", 180.00, _UNSPLASH.format("1590490360182-c33d57733427", 2874)),
    ("202", "Deluxe Room", 180.00, _UNSPLASH.format("1568495248636-6432b97bd949", 2874)),
    ("301", "Executive Suite", 250.00, _UNSPLASH.format("1611892440504-42a792e24d32", 2940)),
]


def seed_rooms() -> list[Room]:
    return [
        Room(id=room_id, type=kind, price=price, available=True, image_url=image)
        for room_id, kind, price, image in SEED_ROOMS
    ]
