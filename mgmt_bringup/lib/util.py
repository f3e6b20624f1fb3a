# Copyright (c) 2025 mgmt_bringup authors
# MIT license - see LICENSE
import os, subprocess, datetime
import logging
import logging.handlers

from ..const import const


def safe_string(piece):
  if piece:
    if isinstance(piece, bytes):
      return piece.decode('utf-8')
    return str(piece)
  return ""


def in_seconds(seconds):
  if isinstance(seconds, datetime.timedelta):
    return seconds.total_seconds()
  return seconds


def is_root():
  return os.geteuid() == 0


def run_command(argv):
  """runs a command to completion.

  :return: (returncode, stdout, stderr) with stdout/stderr as str.
  A missing executable comes back as returncode 127 so that callers
  deal with one kind of failure.
  """
  tlog = get_bringup_logger()
  tlog.debug("run_command: " + repr(argv))
  try:
    proc = subprocess.Popen(argv, stdout=subprocess.PIPE, stderr=subprocess.PIPE, stdin=subprocess.DEVNULL)
  except FileNotFoundError as exc:
    tlog.debug("run_command: %s" % str(exc))
    return (127, "", str(exc))
  (out, err) = proc.communicate()
  out = safe_string(out)
  err = safe_string(err)
  if out:
    tlog.debug("Process stdout: " + out)
    pass
  if err:
    tlog.debug("Process stderr: " + err)
    pass
  return (proc.returncode, out, err)


global _logger_
_logger_ = None

#
#
#
def setup_bringup_logger(logger, log_level=None, filename=None):
  if filename is None:
    filename = os.environ.get(const.MGMT_BRINGUP_LOG)
    pass
  if filename is None:
    if is_root():
      filename = '/tmp/mgmt_bringup.log'
    else:
      filename = '/tmp/mgmt_bringup-development.log'
      pass
    pass
  if log_level is None:
    log_level = logging.INFO
    pass
  blog_handler = logging.handlers.RotatingFileHandler(filename, maxBytes=2**24, backupCount=3)
  blog_formatter = logging.Formatter('%(asctime)s %(processName)-10s/%(threadName)s %(name)s %(levelname)-8s %(message)s')
  blog_handler.setFormatter(blog_formatter)
  if logger:
    while len(logger.handlers):
      logger.removeHandler(logger.handlers[0])
      pass
    logger.addHandler(blog_handler)
    logger.setLevel(log_level)
    pass
  return logger


def get_bringup_logger() -> logging.Logger:
  global _logger_
  if _logger_ is None:
    _logger_ = logging.getLogger('mgmt_bringup')
    setup_bringup_logger(_logger_)
  return _logger_


def set_log_level(log_level):
  get_bringup_logger().setLevel(log_level)
  pass
