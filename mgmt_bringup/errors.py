# Copyright (c) 2025 mgmt_bringup authors
# MIT license - see LICENSE
"""Exceptions raised by the bring-up.

Every one of them is fatal. The runner turns an exception raised by a task
into a failed run, and the command line turns any of them into exit status 1.
"""


class BringupError(Exception):
  pass


# Precondition
class PrivilegeError(BringupError):
  pass


# Resolution
class SerialNumberError(BringupError):
  pass


# Lookup
class MappingError(BringupError):
  pass


class MappingFileNotFound(MappingError):
  pass


class MappingFileUnreadable(MappingError):
  pass


class AddressNotFound(MappingError):
  pass


# Apply
class ApplyError(BringupError):
  pass


class NetworkConfigError(ApplyError):
  pass


class SidebandError(ApplyError):
  pass
