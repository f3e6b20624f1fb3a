# Management plane bring-up
#
# Sets the management IP (netplan) and the BMC IP (ipmitool) of a freshly
# racked server from its serial number.

"""
The top-level :mod:`mgmt_bringup` module.

The :mod:`mgmt_bringup` module defines the version number and the Debian
packages that provide the command line tools the bring-up drives.
"""
name = "mgmt_bringup"

from .version import *

# Semi-standard module versioning.
__version__ = BRINGUP_VERSION

debian_package_dependencies = (
    'dmidecode',     # system serial number
    'netplan.io',    # netplan apply
    'ipmitool',      # ipmitool lan set
)
"""A tuple of strings with required Debian packages."""
