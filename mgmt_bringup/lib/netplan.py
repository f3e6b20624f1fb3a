# Copyright (c) 2025 mgmt_bringup authors
# MIT license - see LICENSE
"""netplan for the management network.

The topology is fixed: the two NICs are bonded (802.3ad) without addresses,
and the management address lives on a VLAN on top of the bond.
Only the address, the gateway and the optional DNS servers change.
"""
import os, sys
import yaml

from ..const import const
from ..errors import NetworkConfigError
from .util import run_command, get_bringup_logger

tlog = get_bringup_logger()

HEADER = "# This file is auto-generated.\n"


def _unconfigured():
  return {'dhcp4': False, 'dhcp6': False}


def make_netplan_tree(mgmt_ip, gateway, prefix_length=const.PREFIX_LENGTH, nameservers=None):
  ethernets = {}
  for nic in const.BOND_MEMBERS:
    ethernets[nic] = _unconfigured()
    pass

  bond = {'interfaces': list(const.BOND_MEMBERS),
          'parameters': {'mode': const.BOND_MODE,
                         'mii-monitor-interval': const.MII_MONITOR_INTERVAL,
                         'up-delay': const.UP_DELAY,
                         'down-delay': const.DOWN_DELAY}}
  bond.update(_unconfigured())

  vlan = {'id': const.VLAN_ID,
          'link': const.BOND_NAME,
          'addresses': ["%s/%d" % (mgmt_ip, prefix_length)],
          'routes': [{'to': 'default', 'via': gateway}]}
  if nameservers:
    vlan['nameservers'] = {'addresses': list(nameservers)}
    pass

  return {'network': {'version': 2,
                      'renderer': 'networkd',
                      'ethernets': ethernets,
                      'bonds': {const.BOND_NAME: bond},
                      'vlans': {"%s.%d" % (const.BOND_NAME, const.VLAN_ID): vlan}}}


def generate_netplan_config(mgmt_ip, gateway, prefix_length=const.PREFIX_LENGTH, nameservers=None):
  """renders the netplan yaml for the management address."""
  tree = make_netplan_tree(mgmt_ip, gateway, prefix_length=prefix_length, nameservers=nameservers)
  return HEADER + yaml.safe_dump(tree, default_flow_style=False, sort_keys=False)


def save_network_config(config_path, content):
  """overwrites the netplan file."""
  try:
    with open(config_path, "w") as output:
      output.write(content)
      pass
    # netplan complains about world readable files
    os.chmod(config_path, 0o600)
    pass
  except OSError as exc:
    raise NetworkConfigError("Failed to write Netplan configuration to '%s'. %s" % (config_path, str(exc)))
  tlog.info("Netplan configuration written to '%s'" % config_path)
  pass


class NetplanApplier(object):
  """netplan apply"""

  def __init__(self, netplan='netplan'):
    self.netplan = netplan
    pass

  def apply_argv(self):
    return [self.netplan, 'apply']

  def apply(self):
    (returncode, out, err) = run_command(self.apply_argv())
    if returncode != 0:
      tlog.info("netplan apply failed with return code %d: %s" % (returncode, err.strip()))
      raise NetworkConfigError("Failed to apply Netplan configuration. Check logs for details. %s" % err.strip())
    tlog.info("Netplan configuration applied.")
    pass

  pass


if __name__ == "__main__":
  sys.stdout.write(generate_netplan_config(sys.argv[1] if len(sys.argv) > 1 else "192.168.10.5",
                                           const.DEFAULT_MGMT_GATEWAY))
  pass
