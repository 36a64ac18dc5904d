"""Caller introspection used by debug-mode logging"""

import inspect
from types import FrameType
from typing import Optional, Tuple


def _frame_at(depth: int) -> Optional[FrameType]:
    """Frame `depth` levels above the caller of this function"""
    frame = inspect.currentframe()
    for _ in range(depth + 1):
        if frame is None:
            break
        frame = frame.f_back
    return frame


class Debugger:
    """
    Reports where code is being called from.

    Every ``steps`` argument counts frames upwards from the function that
    called the helper: ``steps=0`` is that function itself, ``steps=1`` its
    caller, and so on. Frames past the top of the stack give empty results.
    """

    def get_function_name(self, steps: int = 0) -> str:
        """Dotted module and qualified name of the function `steps` frames up"""
        frame = _frame_at(steps + 1)
        if frame is None:
            return ""
        code = frame.f_code
        name = getattr(code, "co_qualname", code.co_name)
        module = frame.f_globals.get("__name__")
        return f"{module}.{name}" if module else name

    def get_calling_function_name(self) -> str:
        """Name of the function that called this method"""
        return self.get_function_name(1)

    def get_file_and_line_number(self, steps: int = 0) -> Tuple[str, int]:
        frame = _frame_at(steps + 1)
        if frame is None:
            return "", 0
        return frame.f_code.co_filename, frame.f_lineno

    def debug_message(self, steps: int = 0) -> str:
        """One line describing the function, file and line `steps` frames up"""
        function_name = self.get_function_name(steps + 1)
        file, line = self.get_file_and_line_number(steps + 1)
        return f"Debug Message - Function name: {function_name}, File: {file}, Line: {line}\n"
