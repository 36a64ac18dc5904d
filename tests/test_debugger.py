from __future__ import annotations

import os

from alailog import Debugger


def _caller(debugger: Debugger) -> str:
    return debugger.get_calling_function_name()


def test_function_name_of_current_frame() -> None:
    name = Debugger().get_function_name(0)
    assert name.endswith(".test_function_name_of_current_frame")


def test_calling_function_name_is_the_direct_caller() -> None:
    assert _caller(Debugger()).endswith("._caller")


def test_file_and_line_number() -> None:
    file, line = Debugger().get_file_and_line_number(0)
    assert os.path.basename(file) == os.path.basename(__file__)
    assert line > 0


def test_out_of_range_frames_are_empty() -> None:
    debugger = Debugger()
    assert debugger.get_function_name(10_000) == ""
    assert debugger.get_file_and_line_number(10_000) == ("", 0)


def test_debug_message_format() -> None:
    message = Debugger().debug_message(0)
    assert message.startswith("Debug Message - Function name: ")
    assert "test_debug_message_format" in message
    assert ", Line: " in message
    assert message.endswith("\n")
