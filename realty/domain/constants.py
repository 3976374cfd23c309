"""Limits and fixed strings shared by the value objects."""

NOT_SPECIFIED = "Не указано"

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 200

DESCRIPTION_MAX_LENGTH = 1000
LICENSE_NUMBER_MIN_LENGTH = 5
FREE_TEXT_MAX_LENGTH = 100  # heating type, property condition

AREA_MAX = 1_000_000
ROOMS_MAX = 100
FLOOR_MIN = -10  # deepest basement level
FLOOR_MAX = 200
TOTAL_FLOORS_MAX = 200

PERIOD_MAX_YEARS = 100

CURRENCY_SYMBOL = "₽"
DATE_FORMAT = "%d.%m.%Y"
