"""Constants for the management plane bring-up.
Once defined, it becomes immutable.
"""


class _const:

  class ConstError(TypeError):
    pass

  def __setattr__(self, name, value):
    if name in self.__dict__:
      raise self.ConstError(name)
    self.__dict__[name] = value

  def __delattr__(self, name):
    if name in self.__dict__:
      raise self.ConstError(name)
    raise NameError(name)
  pass

const = _const()

# Mapping file and netplan output
const.DEFAULT_MAPPING_FILE = "./mapping.txt"
const.NETPLAN_CONFIG_DIR = "/etc/netplan/"
# A higher number ensures it's applied last
const.NETPLAN_CONFIG_FILE_NAME = "70-auto-sigdml-config.yaml"

# Every subnet is a /24. The BMC netmask is derived from this.
const.PREFIX_LENGTH = 24

# Host topology: two NICs bonded with LACP, management on a VLAN on the bond.
const.BOND_MEMBERS = ("ens20f0np0", "ens19f0np0")
const.BOND_NAME = "bond0"
const.BOND_MODE = "802.3ad"
# milliseconds
const.MII_MONITOR_INTERVAL = 100
const.UP_DELAY = 200
const.DOWN_DELAY = 200
const.VLAN_ID = 1000

# Gateway is the .254 of the /24.
const.GATEWAY_HOST_OCTET = "254"
const.DEFAULT_MGMT_GATEWAY = "10.0.0.254"
# Gateway keyword for "derive from the address"
const.GATEWAY_DERIVE = "derive"

# IPMI LAN channel
const.BMC_CHANNEL = 1

# Environment
const.MGMT_BRINGUP_MAPPING_FILE = "MGMT_BRINGUP_MAPPING_FILE"
const.MGMT_BRINGUP_DMIDECODE_OUTPUT = "MGMT_BRINGUP_DMIDECODE_OUTPUT"
const.MGMT_BRINGUP_LOG = "MGMT_BRINGUP_LOG"
