"""
VENUE CATALOG

Static, read-only data the public site renders: the bookable time slots
with their base prices, the event types a booking may be made for,
facilities, the catering menu and the venue's contact details.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TimeSlot:
    id: str
    label: str
    base_price: int


@dataclass(frozen=True)
class EventType:
    value: str
    label: str


TIME_SLOTS = (
    TimeSlot("morning", "Morning (6:00 AM - 12:00 PM)", 15000),
    TimeSlot("afternoon", "Afternoon (12:00 PM - 6:00 PM)", 20000),
    TimeSlot("evening", "Evening (6:00 PM - 12:00 AM)", 25000),
    TimeSlot("fullday", "Full Day (6:00 AM - 12:00 AM)", 45000),
)

TIME_SLOTS_BY_ID = {slot.id: slot for slot in TIME_SLOTS}


EVENT_TYPES = (
    EventType("wedding", "Wedding"),
    EventType("reception", "Reception"),
    EventType("engagement", "Engagement"),
    EventType("birthday", "Birthday Party"),
    EventType("corporate", "Corporate Event"),
    EventType("anniversary", "Anniversary"),
    EventType("other", "Other"),
)

EVENT_TYPE_VALUES = tuple(event.value for event in EVENT_TYPES)


BUSINESS_INFO = {
    "name": "Manomangal Lawns",
    "address": "Shingave Shivar, Shirpur, Maharashtra 425405",
    "phone": "9359525834",
    "whatsapp": "9359525834",
    "coordinates": {"lat": 21.3486, "lng": 74.8811},
    "hours": [
        {"day": "Monday - Friday", "hours": "9:00 AM - 8:00 PM"},
        {"day": "Saturday", "hours": "9:00 AM - 9:00 PM"},
        {"day": "Sunday", "hours": "10:00 AM - 7:00 PM"},
    ],
}


FACILITIES = [
    {"title": "AC Hall", "description": "Fully air-conditioned hall for 200+ guests"},
    {"title": "Garden Area", "description": "Beautiful landscaped garden for outdoor events"},
    {"title": "Parking", "description": "Spacious parking for 100+ vehicles"},
    {"title": "Catering", "description": "In-house catering with variety of cuisines"},
    {"title": "Sound System", "description": "Professional sound and lighting setup"},
    {"title": "Decoration", "description": "Complete decoration services available"},
]


def _item(name: str, price: int, description: str) -> dict:
    return {"name": name, "price": price, "description": description}


MENU_CATEGORIES = [
    {
        "id": "veg-starters",
        "name": "Vegetarian Starters",
        "items": [
            _item("Paneer Tikka", 250, "Grilled cottage cheese with spices"),
            _item("Veg Spring Rolls", 180, "Crispy rolls with mixed vegetables"),
            _item("Aloo Tikki", 150, "Spiced potato patties"),
            _item("Dhokla", 120, "Steamed gram flour cake"),
        ],
    },
    {
        "id": "non-veg-starters",
        "name": "Non-Vegetarian Starters",
        "items": [
            _item("Chicken Tikka", 350, "Grilled chicken with aromatic spices"),
            _item("Fish Fry", 400, "Crispy fried fish with spices"),
            _item("Mutton Seekh Kebab", 450, "Minced mutton grilled on skewers"),
            _item("Prawn Koliwada", 500, "Spicy fried prawns"),
        ],
    },
    {
        "id": "main-course-veg",
        "name": "Vegetarian Main Course",
        "items": [
            _item("Dal Tadka", 200, "Tempered yellow lentils"),
            _item("Paneer Butter Masala", 280, "Cottage cheese in rich tomato gravy"),
            _item("Veg Biryani", 250, "Fragrant rice with mixed vegetables"),
            _item("Chole Bhature", 220, "Spiced chickpeas with fried bread"),
        ],
    },
    {
        "id": "main-course-non-veg",
        "name": "Non-Vegetarian Main Course",
        "items": [
            _item("Chicken Curry", 350, "Traditional chicken curry"),
            _item("Mutton Rogan Josh", 450, "Aromatic mutton curry"),
            _item("Fish Curry", 400, "Coastal style fish curry"),
            _item("Chicken Biryani", 320, "Fragrant rice with tender chicken"),
        ],
    },
    {
        "id": "desserts",
        "name": "Desserts",
        "items": [
            _item("Gulab Jamun", 150, "Sweet milk dumplings in syrup"),
            _item("Rasgulla", 120, "Spongy cottage cheese balls"),
            _item("Ice Cream", 100, "Assorted flavors"),
            _item("Kulfi", 80, "Traditional Indian ice cream"),
        ],
    },
    {
        "id": "beverages",
        "name": "Beverages",
        "items": [
            _item("Fresh Lime Water", 50, "Refreshing lime drink"),
            _item("Lassi", 80, "Traditional yogurt drink"),
            _item("Tea/Coffee", 40, "Hot beverages"),
            _item("Soft Drinks", 60, "Assorted cold drinks"),
        ],
    },
]
