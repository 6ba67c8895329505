"""client_script.py — Browser-side script for the Car List popup.

The script runs inside the ServiceM8 iframe, not in Lambda. It is kept as a
static asset; ``render_client_script`` fills the ``__NAME__`` placeholders
with JSON-encoded values.

Known gap: a failed vehicle list fetch leaves the loading indicator up.
"""
from __future__ import annotations

import re
from typing import Optional

from config import DEFAULT_VEHICLE_MAKE, VEHICLE_LIST_URL
from http_utils import _script_literal

__all__ = ["CLIENT_SCRIPT", "render_client_script"]

CLIENT_SCRIPT = r"""
var client = SMClient.init();

$().ready(function() {

    var VEHICLE_LIST_URL = __VEHICLE_LIST_URL__;
    var DEFAULT_MAKE = __DEFAULT_MAKE__;
    var cars = [];

    function addOption(selector, value) {
        $(selector).append($("<option></option>").val(value).text(value));
    }

    function getMakes() {
        var makes = [];
        cars.forEach(function(car) {
            if (makes.indexOf(car.Make) == -1) {
                makes.push(car.Make);
            }
        });
        return makes;
    }

    // Source order, duplicates kept.
    function getModels(make) {
        var models = [];
        cars.forEach(function(car) {
            if (car.Make == make) {
                models.push(car.Model);
            }
        });
        return models;
    }

    function showModels(make) {
        $("#models_select").empty();
        getModels(make).forEach(function(model) {
            addOption("#models_select", model);
        });
    }

    $.getJSON(VEHICLE_LIST_URL, function(data) {
        cars = data;
        getMakes().forEach(function(make) {
            addOption("#makes_select", make);
        });
        showModels(DEFAULT_MAKE);
        $("#loading").hide();
        $("#input").show();
    });

    $("#makes_select").on("change", function() {
        showModels(this.value);
    });

    $("#button_save").click(function() {
        $("#saving").show();
        client.invoke("car_list_generate", {
            job_uuid: $("#job_uuid").val(),
            make: $("#makes_select").val(),
            model: $("#models_select").val()
        }).then(function(result) {
            client.closeWindow();
        });
    });

});
"""

_PLACEHOLDER = re.compile(r"__(VEHICLE_LIST_URL|DEFAULT_MAKE)__")


def render_client_script(
    vehicle_list_url: Optional[str] = None,
    default_make: Optional[str] = None,
) -> str:
    values = {
        "VEHICLE_LIST_URL": _script_literal(
            VEHICLE_LIST_URL if vehicle_list_url is None else vehicle_list_url
        ),
        "DEFAULT_MAKE": _script_literal(
            DEFAULT_VEHICLE_MAKE if default_make is None else default_make
        ),
    }
    return _PLACEHOLDER.sub(lambda m: values[m.group(1)], CLIENT_SCRIPT)
