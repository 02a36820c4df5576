"""Sample vocabularies used to generate demo campgrounds."""

DESCRIPTORS = [
    "Forest",
    "Ancient",
    "Petrified",
    "Roaring",
    "Cascade",
    "Tumbling",
    "Silent",
    "Redwood",
    "Bullfrog",
    "Maple",
    "Misty",
    "Elk",
    "Grizzly",
    "Ocean",
    "Sea",
    "Sky",
    "Dusty",
    "Diamond",
]

PLACES = [
    "Flats",
    "Village",
    "Canyon",
    "Pond",
    "Group Camp",
    "Horse Camp",
    "Ghost Town",
    "Camp",
    "Dispersed Camp",
    "Backcountry",
    "River",
    "Creek",
    "Creekside",
    "Bay",
    "Spring",
    "Bayshore",
    "Sands",
    "Mule Camp",
    "Hunting Camp",
    "Cliffs",
    "Hollow",
]

CITIES = [
    {"city": "New York", "state": "New York"},
    {"city": "Los Angeles", "state": "California"},
    {"city": "Chicago", "state": "Illinois"},
    {"city": "Houston", "state": "Texas"},
    {"city": "Philadelphia", "state": "Pennsylvania"},
    {"city": "Phoenix", "state": "Arizona"},
    {"city": "San Antonio", "state": "Texas"},
    {"city": "San Diego", "state": "California"},
    {"city": "Dallas", "state": "Texas"},
    {"city": "San Jose", "state": "California"},
    {"city": "Austin", "state": "Texas"},
    {"city": "Indianapolis", "state": "Indiana"},
    {"city": "Jacksonville", "state": "Florida"},
    {"city": "San Francisco", "state": "California"},
    {"city": "Columbus", "state": "Ohio"},
    {"city": "Charlotte", "state": "North Carolina"},
    {"city": "Fort Worth", "state": "Texas"},
    {"city": "Detroit", "state": "Michigan"},
    {"city": "El Paso", "state": "Texas"},
    {"city": "Memphis", "state": "Tennessee"},
    {"city": "Seattle", "state": "Washington"},
    {"city": "Denver", "state": "Colorado"},
    {"city": "Washington", "state": "District of Columbia"},
    {"city": "Boston", "state": "Massachusetts"},
    {"city": "Nashville", "state": "Tennessee"},
    {"city": "Baltimore", "state": "Maryland"},
    {"city": "Oklahoma City", "state": "Oklahoma"},
    {"city": "Louisville", "state": "Kentucky"},
    {"city": "Portland", "state": "Oregon"},
    {"city": "Las Vegas", "state": "Nevada"},
    {"city": "Milwaukee", "state": "Wisconsin"},
    {"city": "Albuquerque", "state": "New Mexico"},
    {"city": "Tucson", "state": "Arizona"},
    {"city": "Fresno", "state": "California"},
    {"city": "Sacramento", "state": "California"},
    {"city": "Kansas City", "state": "Missouri"},
    {"city": "Atlanta", "state": "Georgia"},
    {"city": "Colorado Springs", "state": "Colorado"},
    {"city": "Omaha", "state": "Nebraska"},
    {"city": "Raleigh", "state": "North Carolina"},
    {"city": "Miami", "state": "Florida"},
    {"city": "Minneapolis", "state": "Minnesota"},
    {"city": "Tulsa", "state": "Oklahoma"},
    {"city": "Boise", "state": "Idaho"},
    {"city": "Salt Lake City", "state": "Utah"},
    {"city": "Spokane", "state": "Washington"},
    {"city": "Anchorage", "state": "Alaska"},
    {"city": "Flagstaff", "state": "Arizona"},
    {"city": "Bozeman", "state": "Montana"},
    {"city": "Asheville", "state": "North Carolina"},
]
