# logger_setup.py

import logging
import os
import json

import constants

DEFAULT_LOG_ROOT = 'runs'
LOG_FILE_NAME = 'firework_art.log'
DEFAULT_STATUS_INTERVAL = 100


def setup_logging(config_path='config.json'):
    """
    Sets up logging for the application.

    Reads logging configuration, creates a run-specific log directory, and
    configures a dedicated application logger (not the root logger) to output
    to both the console and a log file. This keeps pygame's own chatter and
    any other library logs out of the run log.

    Data Contract:
    - Inputs: config_path (str) - Path to the configuration file.
    - Outputs: The configured logging.Logger.
    - Side Effects:
        - Configures the "firework_art" logger.
        - Creates <logging.directory or 'runs'>/<run_id>/ for the log file.
    - Invariants: Assumes the config file contains 'run_id' and a 'logging' dictionary
      with 'level' and 'format'. 'logging.directory' is optional.
    """
    with open(config_path, 'r') as f:
        config = json.load(f)

    run_id = config['run_id']
    log_config = config['logging']

    logger = logging.getLogger(constants.LOGGER_NAME)
    logger.setLevel(log_config['level'])
    # Keep records out of the root logger.
    logger.propagate = False

    log_dir = os.path.join(log_config.get('directory', DEFAULT_LOG_ROOT), run_id)
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, LOG_FILE_NAME)

    formatter = logging.Formatter(log_config['format'])
    file_handler = logging.FileHandler(log_file)
    file_handler.setFormatter(formatter)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)

    # Repeated setup replaces the previous run's handlers.
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.addHandler(file_handler)
    logger.addHandler(stream_handler)

    logger.info(f"Logging initialized. Run ID: {run_id}. Log file: {log_file}")
    simulation = config.get('simulation', {})
    logger.info(
        f"Run settings: seed={config.get('master_seed')}, "
        f"cycle_frames={simulation.get('cycle_frames')}, "
        f"status every {status_interval(config)} ticks"
    )
    return logger


def status_interval(config) -> int:
    """
    Returns how many ticks apart the frame status lines are logged, from
    simulation.log_interval_ticks (default 100). 0 turns them off.
    """
    interval = config.get('simulation', {}).get('log_interval_ticks', DEFAULT_STATUS_INTERVAL)
    if not isinstance(interval, int) or isinstance(interval, bool) or interval < 0:
        raise ValueError(f"log_interval_ticks must be a non-negative integer, got {interval!r}")
    return interval


def log_frame_status(tick, active_counts, fps, interval) -> bool:
    """
    Logs one throttled status line at DEBUG when tick lands on interval.
    Returns True if a line was logged.
    """
    if not interval or tick % interval:
        return False
    total = sum(active_counts.values())
    logging.getLogger(constants.LOGGER_NAME).debug(
        f"Tick={tick}, ActiveSparks={active_counts}, TotalSparks={total}, FPS={fps:.1f}"
    )
    return True
