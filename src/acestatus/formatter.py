"""Rider-facing status text derived from Train views."""

from typing import Iterable, Optional

from .models import UNKNOWN, NextStopETA, Train


def _eta_status(eta: Optional[NextStopETA]) -> str:
    if eta is None or not eta.resolved or not eta.status_text:
        return UNKNOWN
    return eta.status_text


def time_text(train: Train) -> str:
    """Return "N min late" for late trains, otherwise "On Time"."""
    if train.delay_minutes < 0:
        return f"{abs(train.delay_minutes)} min late"
    return "On Time"


def next_stop_text(train: Train) -> str:
    eta = train.eta_for_stop(train.next_stop_id)
    name = eta.display_name if eta is not None else UNKNOWN
    return f"Next stop: {name}. ETA: {_eta_status(eta)}"


def destination_text(train: Train) -> str:
    """Return the destination segment, or "" when no destination was resolved."""
    if not train.destination_name:
        return ""
    eta = train.eta_for_stop(train.destination_stop_id)
    return f"Dest: {train.destination_name}. ETA: {_eta_status(eta)}"


def status_line(train: Train) -> str:
    """
    Full status of one train.

    Example: "Train 101 is 3 min late. Next stop: Stockton. ETA: 5 min. "
    """
    return f"Train {train.schedule_number} is {time_text(train)}. {next_stop_text(train)}. {destination_text(train)}"


def stop_filtered_line(train: Train, stop_name: str) -> Optional[str]:
    """
    Bracketed ETA of a train to one stop, matched on the resolved stop name.

    Returns None when the train has no ETA entry for that stop.
    """
    eta = train.eta_for_stop_name(stop_name)
    if eta is None:
        return None
    when = eta.scheduled_time or eta.status_text or UNKNOWN
    return f"[{train.schedule_number} to {stop_name}. ETA: {when}]"


def stop_filtered_status(trains: Iterable[Train], stop_name: str) -> str:
    lines = (stop_filtered_line(train, stop_name) for train in trains)
    return ", ".join(line for line in lines if line)


def status_report(trains: Iterable[Train]) -> str:
    return "\n".join(status_line(train) for train in trains)
