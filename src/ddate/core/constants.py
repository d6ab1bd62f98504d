from __future__ import annotations
from typing import Tuple

SEASONS: Tuple[str, ...] = ("Chaos", "Discord", "Confusion", "Bureaucracy", "The Aftermath")
WEEKDAYS: Tuple[str, ...] = ("Sweetmorn", "Boomtime", "Pungenday", "Prickle-Prickle", "Setting Orange")

# Apostolic holydays fall on day 5 of each season, seasonal holydays on day 50.
APOSTLES: Tuple[str, ...] = ("Mungday", "Mojoday", "Syaday", "Zaraday", "Maladay")
SEASON_HOLYDAYS: Tuple[str, ...] = ("Chaoflux", "Discoflux", "Confuflux", "Bureflux", "Afflux")
APOSTLE_HOLYDAY = 5
SEASON_HOLYDAY = 50

SEASON_DAYS = 73
WEEK_DAYS = 5
ST_TIBS_DAY = 60  # civil day-of-year in leap years
CURSE_OF_GREYFACE = 1166  # YOLD 0 == 1166 BCE
