import functools
import logging
import os
import sys
from collections.abc import Callable
from typing import Any

separator = "".center(60, "-")

def log_test_name(test_name : str) -> None:
    logging.info(separator)
    logging.info(test_name)
    logging.info(separator)

def log_input_expected_result(input : Any, expected : Any, result : Any) -> None:
    logging.info(f"Input: {str(input)}")
    logging.info(f"Expected: {str(expected)}")
    logging.info(f"Result: {str(result)}")
    logging.info("")

def log_input_expected_error(input : Any, expected_error : type[Exception], error : BaseException) -> None:
    """
    Log an error that was expected to be raised
    """
    logging.info(f"Input: {str(input)}")
    logging.info(f"Expected error: {expected_error.__name__}")
    logging.info(f"Error: {type(error).__name__}: {str(error)}")
    logging.info("")

def debugger_attached() -> bool:
    return sys.gettrace() is not None

def skip_if_debugger_attached(func : Callable) -> Callable:
    """
    Skip tests that deliberately raise errors when running under a debugger,
    since they are likely to break on the exception
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        if debugger_attached():
            print(f"Skipping {func.__name__} because a debugger is attached")
            return None
        return func(*args, **kwargs)

    return wrapper

def create_logfile(results_path : str, logfile_name : str, log_level : int = logging.DEBUG) -> logging.FileHandler:
    """
    Add a file handler to the root logger, writing to the results directory
    """
    os.makedirs(results_path, exist_ok=True)
    logfile = os.path.join(results_path, logfile_name)
    file_handler = logging.FileHandler(logfile, encoding='utf-8', mode='w')
    file_handler.setLevel(log_level)
    file_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    logging.getLogger().addHandler(file_handler)
    return file_handler

def end_logfile(file_handler : logging.FileHandler) -> None:
    logging.getLogger().removeHandler(file_handler)
    file_handler.close()
