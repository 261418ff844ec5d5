"""
Console output mirroring shared by the simulation and the test runner
"""
import os
import sys
from contextlib import contextmanager


class TeeStream:
    """Duplicate writes to multiple streams (e.g., console + file)."""
    def __init__(self, *streams):
        self.streams = streams
    
    def write(self, data):
        for stream in self.streams:
            stream.write(data)
            stream.flush()
    
    def flush(self):
        for stream in self.streams:
            stream.flush()


@contextmanager
def tee_output_to_file(log_path: str):
    """Context manager that mirrors stdout/stderr to a file."""
    os.makedirs(os.path.dirname(log_path), exist_ok=True)
    original_stdout = sys.stdout
    original_stderr = sys.stderr
    
    with open(log_path, "w", encoding="utf-8") as log_file:
        try:
            sys.stdout = TeeStream(original_stdout, log_file)
            sys.stderr = TeeStream(original_stderr, log_file)
            yield log_file
        finally:
            sys.stdout = original_stdout
            sys.stderr = original_stderr
