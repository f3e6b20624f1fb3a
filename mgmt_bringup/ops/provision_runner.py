#
# Management plane provisioning
#
# Resolution (serial number, mapping lookup) happens before the runner is
# made, so nothing is written and no command with side effects runs until
# both addresses are known.
#
from collections import namedtuple

from .runner import Runner
from .tasks import task_save_netplan, task_command
from ..config.mapping import lookup_addresses
from ..config.settings import Config
from ..lib.ipaddr import resolve_gateway, prefix_to_netmask
from ..lib.netplan import generate_netplan_config, NetplanApplier
from ..components.bmc import SidebandController
from ..lib.util import get_bringup_logger

tlog = get_bringup_logger()

Assignment = namedtuple('Assignment', ['serial_number', 'controller_ip', 'management_ip'])


def resolve_assignment(inventory, mapping_file) -> Assignment:
  """serial number -> the addresses assigned to this machine."""
  serial_number = inventory.get_serial_number()
  (controller_ip, management_ip) = lookup_addresses(serial_number, mapping_file)
  return Assignment(serial_number, controller_ip, management_ip)


class ProvisionRunner(Runner):
  assignment: Assignment

  def __init__(self, ui, runner_id, assignment: Assignment, config: Config = None,
               applier: NetplanApplier = None, controller: SidebandController = None):
    super().__init__(ui, runner_id)
    self.assignment = assignment
    self.config = config if config else Config()
    self.applier = applier if applier else NetplanApplier()
    self.controller = controller if controller else SidebandController(channel=self.config.BMC_CHANNEL)
    pass

  @property
  def mgmt_gateway(self):
    return resolve_gateway(self.config.MGMT_GATEWAY, self.assignment.management_ip)

  @property
  def bmc_gateway(self):
    return resolve_gateway(self.config.BMC_GATEWAY, self.assignment.controller_ip)

  @property
  def bmc_netmask(self):
    return prefix_to_netmask(self.config.PREFIX_LENGTH)

  def prepare(self):
    super().prepare()

    # sugar
    config = self.config
    controller = self.controller
    controller_ip = self.assignment.controller_ip

    netplan = generate_netplan_config(self.assignment.management_ip, self.mgmt_gateway,
                                      prefix_length=config.PREFIX_LENGTH,
                                      nameservers=config.DNS_SERVERS)
    config_path = config.netplan_config_path
    self.tasks.append(task_save_netplan("Write Netplan configuration", config_path, netplan,
                                        progress_finished="Netplan configuration written to '%s'" % config_path))
    self.tasks.append(task_command("Apply Netplan configuration", self.applier.apply,
                                   argv=self.applier.apply_argv(),
                                   progress_finished="Netplan configuration applied successfully."))

    # BMC. The order matters and a failure stops the rest.
    channel = controller.channel
    netmask = self.bmc_netmask
    gateway = self.bmc_gateway
    self.tasks.append(task_command("Set IPMI channel to static", controller.set_static,
                                   argv=controller.lan_set_argv('ipsrc', 'static'),
                                   progress_finished="IPMI: Set channel %d to static." % channel))
    self.tasks.append(task_command("Set IPMI IP address", controller.set_address, args=(controller_ip,),
                                   argv=controller.lan_set_argv('ipaddr', controller_ip),
                                   progress_finished="IPMI: IP address set to %s." % controller_ip))
    self.tasks.append(task_command("Set IPMI netmask", controller.set_netmask, args=(netmask,),
                                   argv=controller.lan_set_argv('netmask', netmask),
                                   progress_finished="IPMI: Netmask set to %s." % netmask))
    self.tasks.append(task_command("Set IPMI default gateway", controller.set_gateway, args=(gateway,),
                                   argv=controller.lan_set_argv('defgw', 'ipaddr', gateway),
                                   progress_finished="IPMI: Default gateway set to %s." % gateway))
    pass

  pass


def run_provision(ui, inventory, config: Config, do_it=True, applier=None, controller=None):
  """resolves the addresses, then applies them.

  Any error during resolution is raised before a runner exists.
  :return: True when every task succeeded (or do_it is False).
  """
  assignment = resolve_assignment(inventory, config.MAPPING_FILE)
  ui.log(assignment.serial_number, "Found: IPMI-IP=%s, MGMT-IP=%s" % (assignment.controller_ip, assignment.management_ip))

  runner = ProvisionRunner(ui, assignment.serial_number, assignment, config=config,
                           applier=applier, controller=controller)
  runner.prepare()
  runner.preflight()
  if not do_it:
    runner.explain()
    return True
  return runner.run()
