# Copyright (c) 2025 mgmt_bringup authors
# MIT license - see LICENSE
"""
settings.py: bring-up configuration

Defaults live here as class attributes. The mapping file can come from the
environment. The command line overrides everything.
"""
import os

from ..const import const


class Config(object):
  """Base configuration."""

  MAPPING_FILE = const.DEFAULT_MAPPING_FILE
  NETPLAN_CONFIG_DIR = const.NETPLAN_CONFIG_DIR
  NETPLAN_CONFIG_FILE_NAME = const.NETPLAN_CONFIG_FILE_NAME

  # Either an address or "derive" (first three octets + .254).
  # The host side has always used the fixed one. The BMC side derives it.
  MGMT_GATEWAY = const.DEFAULT_MGMT_GATEWAY
  BMC_GATEWAY = const.GATEWAY_DERIVE

  BMC_CHANNEL = const.BMC_CHANNEL
  PREFIX_LENGTH = const.PREFIX_LENGTH

  # DNS servers for the management VLAN. None leaves them out.
  DNS_SERVERS = None

  def __init__(self, **overrides):
    mapping_file = os.environ.get(const.MGMT_BRINGUP_MAPPING_FILE)
    if mapping_file:
      self.MAPPING_FILE = mapping_file
      pass
    for key, value in overrides.items():
      if not hasattr(Config, key):
        raise AttributeError("Unknown configuration " + key)
      if value is not None:
        setattr(self, key, value)
        pass
      pass
    pass

  @property
  def netplan_config_path(self):
    return os.path.join(self.NETPLAN_CONFIG_DIR, self.NETPLAN_CONFIG_FILE_NAME)

  pass
