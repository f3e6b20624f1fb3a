#!/usr/bin/python3
# Copyright (c) 2025 mgmt_bringup authors
# MIT license - see LICENSE
"""BMC LAN channel configuration through ipmitool.

Each setter is one "ipmitool lan set" command with its own exit status.
Nothing is read back, and a failed setter leaves whatever the earlier ones
already changed.
"""
from ..const import const
from ..errors import SidebandError
from ..lib.util import run_command, get_bringup_logger

tlog = get_bringup_logger()


class SidebandController(object):

  def __init__(self, channel=const.BMC_CHANNEL, ipmitool='ipmitool'):
    self.channel = channel
    self.ipmitool = ipmitool
    pass

  def lan_set_argv(self, *params):
    return [self.ipmitool, 'lan', 'set', str(self.channel)] + [str(param) for param in params]

  def _lan_set(self, what, *params):
    argv = self.lan_set_argv(*params)
    (returncode, out, err) = run_command(argv)
    if returncode != 0:
      tlog.info("%s failed with return code %d: %s" % (" ".join(argv), returncode, err.strip()))
      raise SidebandError("Failed to set IPMI %s. %s" % (what, err.strip()))
    pass

  def set_static(self):
    self._lan_set("channel %d to static" % self.channel, 'ipsrc', 'static')
    pass

  def set_address(self, ip_address):
    self._lan_set("IP address", 'ipaddr', ip_address)
    pass

  def set_netmask(self, netmask):
    self._lan_set("netmask", 'netmask', netmask)
    pass

  def set_gateway(self, gateway):
    self._lan_set("default gateway", 'defgw', 'ipaddr', gateway)
    pass

  pass
