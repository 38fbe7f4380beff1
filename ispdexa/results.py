"""Reading simulation results and turning them into text reports and files."""

from __future__ import annotations

import json
from os import PathLike
from pathlib import Path
from typing import Any, Mapping, Union

RESULTS_FILE = "results.json"
MACHINE_VALUES_FILE = "machine_values.txt"
LINK_VALUES_FILE = "link_values.txt"

REPORT_TITLE = (
    "                                                                    "
    "Simulation Results                  "
)


def _number(obj: Mapping[str, Any], key: str) -> float:
    """The value under ``key`` as a float; anything that is not a number is 0."""
    value = obj.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    return float(value)


def _object(obj: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = obj.get(key)
    return value if isinstance(value, dict) else {}


def _array(obj: Mapping[str, Any], key: str) -> list:
    value = obj.get(key)
    return value if isinstance(value, list) else []


def _string(obj: Mapping[str, Any], key: str) -> str:
    value = obj.get(key)
    return value if isinstance(value, str) else ""


def _entries(obj: Mapping[str, Any], key: str) -> list[Mapping[str, Any]]:
    """The objects of the array under ``key``; other elements count as empty."""
    return [entry if isinstance(entry, dict) else {} for entry in _array(obj, key)]


def format_number(value: float) -> str:
    """Shortest general form of a number with six significant digits."""
    return f"{float(value):g}"


def load_results(path: Union[str, PathLike]) -> dict[str, Any]:
    """Read a results document; it must hold a JSON object."""
    with open(path, encoding="utf-8") as source:
        document = json.load(source)
    if not isinstance(document, dict):
        raise ValueError(f"{path}: results must be a JSON object")
    return document


def global_report(data: Mapping[str, Any]) -> list[str]:
    """Lines summing up the whole simulation, ending with an efficiency grade."""
    efficiency = _number(data, "efficiency")
    lines = [
        REPORT_TITLE,
        "",
        "Total Simulated Time = " + format_number(_number(data, "total_simulated_time")),
        "Satisfaction = " + format_number(_number(data, "satisfaction")) + " %",
        "Idleness of processing resources = "
        + format_number(_number(data, "idleness_processing"))
        + " %",
        "Idleness of communication resources = "
        + format_number(_number(data, "idleness_communication"))
        + " %",
        "Efficiency = " + format_number(efficiency) + " %",
    ]
    if efficiency > 70.0:
        lines.append("Efficiency GOOD")
    elif efficiency > 40.0:
        lines.append("Efficiency MEDIUM")
    else:
        lines.append("Efficiency BAD")
    return lines


def _seconds(label: str, value: float) -> str:
    return f"   {label}{format_number(value)} seconds"


def _timing_lines(owner: Mapping[str, Any], last_system_label: str) -> list[str]:
    communication = _object(owner, "communication")
    processing = _object(owner, "processing")
    return [
        "Communication",
        _seconds("Queue average time: ", _number(communication, "queue_average_time")),
        _seconds(
            "Communication average time: ",
            _number(communication, "communication_average_time"),
        ),
        _seconds("System average time: ", _number(communication, "system_average_time")),
        "",
        "Processing",
        _seconds("Queue average time: ", _number(processing, "queue_average_time")),
        _seconds(
            "Processing average time: ", _number(processing, "processing_average_time")
        ),
        _seconds(last_system_label, _number(processing, "system_average_time")),
    ]


def tasks_report(data: Mapping[str, Any]) -> list[str]:
    """Average communication and processing times of all tasks."""
    return _timing_lines(data, "System average time: ")


def users_report(data: Mapping[str, Any]) -> list[str]:
    """Average times and task count for each user, one block per user."""
    lines: list[str] = []
    for user in _entries(data, "users"):
        lines.append("                        User " + _string(user, "label"))
        lines.append("")
        lines.append("Number of task: " + format_number(_number(user, "number_of_tasks")))
        lines.append("")
        lines.extend(_timing_lines(user, "System average time:  "))
        lines.append("")
    return lines


def resources_table(data: Mapping[str, Any]) -> list[tuple[str, str, str, str]]:
    """Rows of label, owner, processing and communication; machines then links."""
    rows = [
        (
            _string(machine, "label"),
            _string(machine, "owner"),
            format_number(_number(machine, "processing_performed")),
            format_number(_number(machine, "communication_performed")),
        )
        for machine in _entries(data, "machines")
    ]
    rows += [
        (
            _string(link, "label"),
            "---",
            format_number(_number(link, "processing_performed")),
            format_number(_number(link, "communication_performed")),
        )
        for link in _entries(data, "links")
    ]
    return rows


def write_value_files(
    data: Mapping[str, Any], directory: Union[str, PathLike]
) -> tuple[Path, Path]:
    """Write ``value_label`` lines for machines (Mflops) and links (Mbits).

    Returns the paths of the machine file and of the link file.
    """
    base = Path(directory)
    machine_path = base / MACHINE_VALUES_FILE
    link_path = base / LINK_VALUES_FILE

    machine_values = "".join(
        f"{format_number(_number(machine, 'Mflops'))}_{_string(machine, 'label')}\n"
        for machine in _entries(data, "machines")
    )
    link_values = "".join(
        f"{format_number(_number(link, 'Mbits'))}_{_string(link, 'label')}\n"
        for link in _entries(data, "links")
    )

    machine_path.write_text(machine_values, encoding="utf-8")
    link_path.write_text(link_values, encoding="utf-8")
    return machine_path, link_path