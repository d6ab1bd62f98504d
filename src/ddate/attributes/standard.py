from __future__ import annotations
from typing import Any, Dict

from ..core.calendar import holyday_kind
from .registry import register_attribute

def weekday(info) -> Dict[str, Any]:
    dd = info.discordian
    return {"weekday": dd.weekday, "weekday_name": dd.weekday_name}

def season(info) -> Dict[str, Any]:
    dd = info.discordian
    return {
        "season": dd.season,
        "season_name": dd.season_name,
        "day_of_season": dd.day_of_season,
    }

def holyday(info) -> Dict[str, Any]:
    return {"holyday": info.holyday, "holyday_kind": holyday_kind(info.discordian)}

def st_tibs(info) -> Dict[str, Any]:
    return {"st_tibs_day": info.discordian.is_st_tibs_day}

register_attribute("weekday", weekday)
register_attribute("season", season)
register_attribute("holyday", holyday)
register_attribute("st_tibs", st_tibs)
