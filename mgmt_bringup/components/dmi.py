#!/usr/bin/python3
# Copyright (c) 2025 mgmt_bringup authors
# MIT license - see LICENSE
"""System identity from DMI.

The serial number is the key into the mapping file, so it is normalized the
same way the mapping file is written: spaces become dashes.
"""
import os

from ..const import const
from ..errors import SerialNumberError
from ..lib.util import run_command, get_bringup_logger

tlog = get_bringup_logger()

DMIDECODE_SERIAL_NUMBER = ['dmidecode', '-s', 'system-serial-number']


def normalize_serial_number(serial_number: str) -> str:
  """Convert spaces to dashes. Normalizing twice is the same as once."""
  return serial_number.replace(" ", "-")


def _maybe_run_dmidecode():
  """runs dmidecode (maybe)

Environ:
MGMT_BRINGUP_DMIDECODE_OUTPUT: If set, reads a text file as dmidecode output for testing.
"""
  dmidecode_output = os.environ.get(const.MGMT_BRINGUP_DMIDECODE_OUTPUT)
  if dmidecode_output:
    with open(dmidecode_output) as test_input:
      return (0, test_input.read(), "")
    pass
  return run_command(DMIDECODE_SERIAL_NUMBER)


class HardwareInventory(object):
  """Local hardware inventory. Only the serial number is of interest."""

  def get_serial_number(self) -> str:
    (returncode, out, err) = _maybe_run_dmidecode()
    if returncode != 0:
      tlog.info("dmidecode failed with return code %d: %s" % (returncode, err.strip()))
      raise SerialNumberError("Could not retrieve serial number using dmidecode. "
                              "Please ensure dmidecode is installed and accessible.")
    serial_number = out.strip()
    if not serial_number:
      raise SerialNumberError("dmidecode returned an empty system serial number.")
    serial_number = normalize_serial_number(serial_number)
    tlog.info("System serial number: " + serial_number)
    return serial_number
  pass


if __name__ == "__main__":
  print(HardwareInventory().get_serial_number())
  pass
