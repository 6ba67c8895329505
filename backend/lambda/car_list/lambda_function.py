"""car_list/lambda_function.py

ServiceM8 add-on Lambda — Car List make/model selector.

Events:
    car_list_start      Render the make/model popup for a job
    car_list_generate   Post "Make: X  Model: Y" as a note on the job

Any other event name returns an empty result.

Environment variables:
    SERVICEM8_API_BASE          default: https://api.servicem8.com/api_1.0
    NOTE_POST_TIMEOUT_SECONDS   default: 15
    VEHICLE_LIST_URL            default: http://www.touchupguys.com.au/cars.json
    DEFAULT_VEHICLE_MAKE        default: Abarth
    LOG_LEVEL                   default: INFO
"""

from __future__ import annotations

from typing import Any, Dict

from config import configure_logging
from events import EventKind, parse_event
from handlers import handle_car_list_generate, handle_car_list_start
from http_utils import _empty_response

logger = configure_logging()


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    addon_event = parse_event(event)
    logger.info("add-on event received: %s", addon_event.name or "<none>")

    if addon_event.kind is EventKind.CAR_LIST_START:
        return handle_car_list_start(addon_event)
    if addon_event.kind is EventKind.CAR_LIST_GENERATE:
        return handle_car_list_generate(addon_event)

    logger.info("ignoring unknown event: %s", addon_event.name or "<none>")
    return _empty_response()
