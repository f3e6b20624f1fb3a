#!/usr/bin/env python3
# Copyright (c) 2025 mgmt_bringup authors
# MIT license - see LICENSE
"""Serial number to IP mapping file.

One machine per line, space separated:

  <serial> <bmc ip> <management ip>

No header, no comments. If a serial shows up more than once, the first row
wins and the rest are ignored.
"""
import os
from collections import namedtuple

from ..errors import MappingFileNotFound, MappingFileUnreadable, AddressNotFound
from ..lib.util import get_bringup_logger

tlog = get_bringup_logger()

MappingRow = namedtuple('MappingRow', ['serial_number', 'controller_ip', 'management_ip'])


def read_mapping_rows(mapping_file):
  """yields the rows of the mapping file in file order.
Missing fields come back as empty strings. Bytes that are not UTF-8
survive as surrogates so a bad row cannot stop the scan.
"""
  try:
    mapping = open(mapping_file, encoding="utf-8", errors="surrogateescape")
  except OSError as exc:
    raise MappingFileUnreadable("Mapping file at '%s' is not readable. %s" % (mapping_file, str(exc)))

  with mapping:
    for line in mapping:
      fields = line.split()
      if not fields:
        continue
      fields = (fields + ["", ""])[:3]
      yield MappingRow(*fields)
      pass
    pass
  pass


def find_mapping_row(serial_number, mapping_file):
  """returns the first row for the serial number, or None."""
  if not os.path.isfile(mapping_file):
    raise MappingFileNotFound("Mapping file not found at '%s'." % mapping_file)

  for row in read_mapping_rows(mapping_file):
    if row.serial_number == serial_number:
      return row
    pass
  return None


def lookup_addresses(serial_number, mapping_file):
  """looks up (controller_ip, management_ip) for the serial number.

  A row with a missing address is as good as no row.
  """
  row = find_mapping_row(serial_number, mapping_file)
  if row is None or not row.controller_ip or not row.management_ip:
    raise AddressNotFound("Could not find IP addresses for serial number '%s' in '%s'." % (serial_number, mapping_file))
  tlog.info("%s: IPMI-IP=%s, MGMT-IP=%s" % (serial_number, row.controller_ip, row.management_ip))
  return (row.controller_ip, row.management_ip)
