import json
from config.paths import CONSTANTS_PATH

"""
Loads ward constants from config/constants.json and exposes them as module-level variables.
Edit constants.json to change values; import from utils.constants to use in code.
"""

with open(CONSTANTS_PATH, "r", encoding="utf-8") as f:
    _constants = json.load(f)

# Bed numbering: unit * 100 + index
VALID_UNITS = tuple(_constants["VALID_UNITS"])
FIRST_BED_INDEX = _constants["FIRST_BED_INDEX"]
LAST_BED_INDEX = _constants["LAST_BED_INDEX"]
UNIT_MULTIPLIER = 100

# Admission policy
PEDIATRIC_UNIT = _constants["PEDIATRIC_UNIT"]
PEDIATRIC_AGE_LIMIT = _constants["PEDIATRIC_AGE_LIMIT"]
MINOR_AGE_LIMIT = _constants["MINOR_AGE_LIMIT"]

# Clinical record numbers are 5 digits
MIN_CLINICAL_RECORD = _constants["MIN_CLINICAL_RECORD"]
MAX_CLINICAL_RECORD = _constants["MAX_CLINICAL_RECORD"]

# 4 units * 38 beds = 152 with the shipped configuration
TOTAL_BEDS = len(VALID_UNITS) * (LAST_BED_INDEX - FIRST_BED_INDEX + 1)
