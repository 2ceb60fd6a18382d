"""Bundled shelter directory snapshot used when no directory file is configured.

Delhi government-school night shelters, one record per shelter in the
canonical column layout.
"""
import pandas as pd

_EVENING = "6:00 PM"
_MORNING = "6:00 AM"

SAMPLE_SHELTERS = [
    {
        "Shelter ID": "1",
        "Shelter Name": "Govt. Boys Sr. Sec. School - Sarai Kale Khan",
        "Address": "Sarai Kale Khan, Near ISBT, Delhi",
        "Total Beds": 150,
        "Available Beds": 42,
        "Status": "available",
        "Volunteers": 12,
        "Meals Available": True,
        "Latitude": 28.5921,
        "Longitude": 77.254,
        "Amenities": "Blankets, Meals, Toilets, Medical Aid",
        "Phone": "+91-11-23456001",
    },
    {
        "Shelter ID": "2",
        "Shelter Name": "Govt. Co-ed School - Yamuna Pushta",
        "Address": "Yamuna Pushta, Near ITO, Delhi",
        "Total Beds": 120,
        "Available Beds": 18,
        "Status": "limited",
        "Volunteers": 8,
        "Meals Available": True,
        "Latitude": 28.6328,
        "Longitude": 77.2478,
        "Amenities": "Blankets, Meals, Toilets, Hygiene Kits",
        "Phone": "+91-11-23456002",
    },
    {
        "Shelter ID": "3",
        "Shelter Name": "Govt. Girls School - AIIMS Area",
        "Address": "Near AIIMS Metro Station, Delhi",
        "Total Beds": 100,
        "Available Beds": 0,
        "Status": "full",
        "Volunteers": 6,
        "Meals Available": False,
        "Latitude": 28.5689,
        "Longitude": 77.21,
        "Amenities": "Blankets, Toilets, Counseling",
        "Phone": "+91-11-23456003",
    },
    {
        "Shelter ID": "4",
        "Shelter Name": "Govt. Sr. Sec. School - Nizamuddin",
        "Address": "Hazrat Nizamuddin, Near Station, Delhi",
        "Total Beds": 80,
        "Available Beds": 35,
        "Status": "available",
        "Volunteers": 10,
        "Meals Available": True,
        "Latitude": 28.59,
        "Longitude": 77.2514,
        "Amenities": "Blankets, Meals, Toilets, Clothing",
        "Phone": "+91-11-23456004",
    },
    {
        "Shelter ID": "5",
        "Shelter Name": "Govt. Boys School - Kashmere Gate",
        "Address": "Kashmere Gate, Near ISBT, Delhi",
        "Total Beds": 200,
        "Available Beds": 8,
        "Status": "limited",
        "Volunteers": 15,
        "Meals Available": True,
        "Latitude": 28.6669,
        "Longitude": 77.228,
        "Amenities": "Blankets, Meals, Toilets, WiFi, Medical Aid",
        "Phone": "+91-11-23456005",
    },
    {
        "Shelter ID": "6",
        "Shelter Name": "Govt. Primary School - Jama Masjid",
        "Address": "Near Jama Masjid, Old Delhi",
        "Total Beds": 90,
        "Available Beds": 25,
        "Status": "available",
        "Volunteers": 7,
        "Meals Available": True,
        "Latitude": 28.6507,
        "Longitude": 77.2334,
        "Amenities": "Blankets, Meals, Toilets",
        "Phone": "+91-11-23456006",
    },
    {
        "Shelter ID": "7",
        "Shelter Name": "Govt. Co-ed School - Connaught Place",
        "Address": "Near Connaught Place, Central Delhi",
        "Total Beds": 110,
        "Available Beds": 45,
        "Status": "available",
        "Volunteers": 9,
        "Meals Available": True,
        "Latitude": 28.6315,
        "Longitude": 77.2167,
        "Amenities": "Blankets, Meals, Toilets, Hygiene Kits",
        "Phone": "+91-11-23456007",
    },
    {
        "Shelter ID": "8",
        "Shelter Name": "Govt. Girls School - Chandni Chowk",
        "Address": "Chandni Chowk, Old Delhi",
        "Total Beds": 75,
        "Available Beds": 12,
        "Status": "limited",
        "Volunteers": 5,
        "Meals Available": True,
        "Latitude": 28.6562,
        "Longitude": 77.2301,
        "Amenities": "Blankets, Meals, Toilets",
        "Phone": "+91-11-23456008",
    },
]


def sample_shelter_frame() -> pd.DataFrame:
    df = pd.DataFrame(SAMPLE_SHELTERS)
    df["Check-In Time"] = _EVENING
    df["Check-Out Time"] = _MORNING
    return df
