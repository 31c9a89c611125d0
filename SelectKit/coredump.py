import json
import pickle
import platform
import sys
import traceback
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclass
class CoreDumpData:
    # Exception
    exception: Optional[Exception]
    exception_type: str
    exception_message: str
    traceback_text: str

    # Snapshots of the select widgets on the active form (empty if import failed)
    widget_states: List[Dict[str, Any]]

    # Environment / debug info
    selectkit_version: str
    python_version: str
    platform_info: str
    os_info: str
    timestamp: str
    working_directory: str
    write_location: str


def _widget_states() -> List[Dict[str, Any]]:
    """Collects controller snapshots from the form being filled in, if any."""
    try:
        from SelectKit.frontends.inquirer_cli import ACTIVE_COMPONENTS
    except Exception:
        return []

    states = []
    pending = list(ACTIVE_COMPONENTS)
    while pending:
        component = pending.pop(0)
        pending.extend(getattr(component, "dependents", []))
        if hasattr(component, "source"):
            pending.insert(0, component.source)
        controller = getattr(component, "controller", None)
        if controller is not None:
            snapshot = controller.snapshot()
            snapshot["identifier"] = component.identifier
            states.append(snapshot)
    return states


def write_coredump(exception: Exception) -> str:
    """Write a coredump (text crash report + pickle) for an unhandled exception.

    Returns the path to the text crash report file.
    """
    # a broken SelectKit import must not stop the report
    __version__ = "0.1.0"
    try:
        from SelectKit import BASE_WRITE_LOCATION
    except Exception:
        BASE_WRITE_LOCATION = str(Path.home() / "selectkit")

    timestamp = datetime.now()
    stamp = timestamp.strftime("%Y-%m-%d_%H-%M-%S")

    base_coredump_location = Path(BASE_WRITE_LOCATION) / "coredumps"
    base_coredump_location.mkdir(parents=True, exist_ok=True)

    txt_path = str(base_coredump_location / f"coredump_{stamp}.txt")
    pkl_path = str(base_coredump_location / f"coredump_{stamp}.pkl")

    coredump_data = CoreDumpData(
        exception=exception,
        exception_type=type(exception).__name__,
        exception_message=str(exception),
        traceback_text=traceback.format_exc(),
        widget_states=_widget_states(),
        selectkit_version=__version__,
        python_version=sys.version,
        platform_info=platform.platform(),
        os_info=f"{platform.system()} {platform.release()}",
        timestamp=timestamp.isoformat(),
        working_directory=str(Path.cwd()),
        write_location=BASE_WRITE_LOCATION,
    )

    pickle_status = _write_pickle(coredump_data, pkl_path)

    d = coredump_data
    lines = [
        "=== SELECTKIT CRASH REPORT ===",
        "",
        f"Timestamp: {d.timestamp}",
        f"SelectKit version: {d.selectkit_version}",
        f"Python version: {d.python_version}",
        f"Platform: {d.platform_info}",
        f"OS: {d.os_info}",
        f"Working directory: {d.working_directory}",
        f"Write location: {d.write_location}",
        "",
        f"Exception type: {d.exception_type}",
        f"Exception message: {d.exception_message}",
        "",
        "--- Traceback ---",
        d.traceback_text,
        "--- Widget states ---",
        json.dumps(d.widget_states, indent=2, default=str),
        "",
        "--- Pickle status ---",
        pickle_status,
        "",
    ]

    with open(txt_path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines))

    return txt_path


def _write_pickle(coredump_data: CoreDumpData, pkl_path: str) -> str:
    """Try to pickle the CoreDumpData with graduated fallback.

    Returns a status string for the text report.
    """
    # as-is
    try:
        with open(pkl_path, "wb") as f:
            pickle.dump(coredump_data, f)
        return "Pickle written successfully (with traceback)."
    except Exception:
        pass

    # without the traceback
    try:
        if coredump_data.exception is not None:
            coredump_data.exception.__traceback__ = None
        with open(pkl_path, "wb") as f:
            pickle.dump(coredump_data, f)
        return "Pickle written successfully (traceback stripped)."
    except Exception:
        pass

    # without the exception
    try:
        coredump_data.exception = None
        with open(pkl_path, "wb") as f:
            pickle.dump(coredump_data, f)
        return "Pickle written successfully (exception stripped)."
    except Exception as e:
        pkl_err = e

    # no pickle at all
    try:
        Path(pkl_path).unlink()
    except OSError:
        pass
    return f"Pickle failed: {pkl_err}"
