# Copyright (c) 2025 mgmt_bringup authors
# MIT license - see LICENSE
"""Address helpers.

None of these validate the address. A bad address goes through as-is and
the tool consuming it is the one to complain.
"""
import ipaddress

from ..const import const


def derive_gateway(ip_address: str) -> str:
  """first three octets of the address + .254 (eg. 10.0.0.11 -> 10.0.0.254)"""
  return ".".join(ip_address.split(".")[:3] + [const.GATEWAY_HOST_OCTET])


def resolve_gateway(gateway: str, ip_address: str) -> str:
  """returns the gateway to use for the address.

  gateway is either a literal address or the keyword "derive".
  """
  if gateway == const.GATEWAY_DERIVE:
    return derive_gateway(ip_address)
  return gateway


def prefix_to_netmask(prefix_length: int) -> str:
  return str(ipaddress.IPv4Network((0, prefix_length)).netmask)
