#!/usr/bin/env python3
#
# Reads the serial number, finds the IPs for it in the mapping file,
# configures netplan for the management IP and sets the IPMI IP.
#
# This must run as root.
#
import sys
import argparse
import logging
import traceback

from ..config.settings import Config
from ..components.dmi import HardwareInventory
from ..errors import BringupError, PrivilegeError
from ..lib.util import get_bringup_logger, set_log_level, is_root
from ..ops.ops_ui import console_ui
from ..ops.provision_runner import run_provision

tlog = get_bringup_logger()


def make_parser():
  parser = argparse.ArgumentParser(description="Set the management IP and the BMC IP of this machine from its serial number.")
  parser.add_argument("-f", "--mapping-file", dest="mapping_file",
                      help="Serial number to IP mapping file. Each line is '<serial> <ipmi ip> <mgmt ip>'. (default: %s)" % Config.MAPPING_FILE)
  parser.add_argument("--netplan-dir", dest="netplan_dir",
                      help="Netplan configuration directory. (default: %s)" % Config.NETPLAN_CONFIG_DIR)
  parser.add_argument("--netplan-file", dest="netplan_file",
                      help="Netplan configuration file name. (default: %s)" % Config.NETPLAN_CONFIG_FILE_NAME)
  parser.add_argument("--mgmt-gateway", dest="mgmt_gateway",
                      help="Gateway for the management VLAN. An address or 'derive'. (default: %s)" % Config.MGMT_GATEWAY)
  parser.add_argument("--bmc-gateway", dest="bmc_gateway",
                      help="Gateway for the BMC. An address or 'derive'. (default: %s)" % Config.BMC_GATEWAY)
  parser.add_argument("--channel", type=int, dest="channel",
                      help="IPMI LAN channel. (default: %d)" % Config.BMC_CHANNEL)
  parser.add_argument("--dns", action="append", dest="dns", metavar="ADDRESS",
                      help="DNS server for the management VLAN. Can be repeated.")
  parser.add_argument("-p", "--preflight", action="store_true", help="Resolves the addresses and shows the plan only.")
  parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
  return parser


def make_config(args):
  return Config(MAPPING_FILE=args.mapping_file,
                NETPLAN_CONFIG_DIR=args.netplan_dir,
                NETPLAN_CONFIG_FILE_NAME=args.netplan_file,
                MGMT_GATEWAY=args.mgmt_gateway,
                BMC_GATEWAY=args.bmc_gateway,
                BMC_CHANNEL=args.channel,
                DNS_SERVERS=args.dns)


def check_root():
  if not is_root():
    raise PrivilegeError("This script must be run as root. Please use 'sudo'.")
  pass


def main(argv=None, ui=None, inventory=None, applier=None, controller=None):
  args = make_parser().parse_args(argv)
  if args.verbose:
    set_log_level(logging.DEBUG)
    pass
  if ui is None:
    ui = console_ui()
    pass
  if inventory is None:
    inventory = HardwareInventory()
    pass

  try:
    check_root()
    config = make_config(args)
    print("Starting network configuration script...")
    if run_provision(ui, inventory, config, do_it=not args.preflight,
                     applier=applier, controller=controller):
      if not args.preflight:
        print("\nNetwork configuration script completed successfully!")
        pass
      return 0
    return 1
  except BringupError as exc:
    tlog.error(str(exc))
    sys.stderr.write("Error: %s\n" % str(exc))
    return 1
  except Exception:
    tb = traceback.format_exc()
    tlog.error(tb)
    sys.stderr.write(tb + "\n")
    return 1
  pass


def entry_point():
  sys.exit(main())
  pass


if __name__ == "__main__":
  entry_point()
  pass
