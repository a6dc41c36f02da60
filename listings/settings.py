# Listings filter settings
import os

# Field aliases, first match wins
PRICE_ALIASES = ("price", "Price", "PRICE")
AREA_ALIASES = ("area", "Area", "size", "sqft", "square", "area_m2", "area_total")
FURNISHING_ALIASES = ("furnishingstatus", "furnishing_status", "furnished", "FurnishingStatus")

# Furnished filter
FURNISHED_MARKER = "furnish"
FURNISHED_EXACT = "furnished"

# Input / output
INPUT_ENCODING = "utf-8"
OUTPUT_ENCODING = "utf-8"
LINE_SEPARATOR = "\n"

# Logging
LOG_LEVEL = os.getenv("LISTINGS_LOG_LEVEL", "WARNING")
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
