import unittest
from unittest import mock

from mgmt_bringup.components.bmc import SidebandController
from mgmt_bringup.config.settings import Config
from mgmt_bringup.const import const
from mgmt_bringup.errors import SidebandError
from mgmt_bringup.lib.ipaddr import derive_gateway, resolve_gateway, prefix_to_netmask


class Test_bmc(unittest.TestCase):

  def test_commands(self):
    bmc = SidebandController()
    with mock.patch("mgmt_bringup.components.bmc.run_command", return_value=(0, "", "")) as run:
      bmc.set_static()
      bmc.set_address("10.0.0.11")
      bmc.set_netmask("255.255.255.0")
      bmc.set_gateway("10.0.0.254")
      pass
    self.assertEqual([call.args[0] for call in run.call_args_list],
                     [["ipmitool", "lan", "set", "1", "ipsrc", "static"],
                      ["ipmitool", "lan", "set", "1", "ipaddr", "10.0.0.11"],
                      ["ipmitool", "lan", "set", "1", "netmask", "255.255.255.0"],
                      ["ipmitool", "lan", "set", "1", "defgw", "ipaddr", "10.0.0.254"]])
    pass

  def test_channel(self):
    bmc = SidebandController(channel=8)
    self.assertEqual(bmc.lan_set_argv("ipsrc", "static"), ["ipmitool", "lan", "set", "8", "ipsrc", "static"])
    pass

  def test_failure(self):
    bmc = SidebandController()
    with mock.patch("mgmt_bringup.components.bmc.run_command", return_value=(1, "", "Invalid command")):
      with self.assertRaises(SidebandError) as ctx:
        bmc.set_netmask("255.255.255.0")
        pass
      self.assertIn("netmask", str(ctx.exception))
      pass
    pass

  pass


class Test_ipaddr(unittest.TestCase):

  def test_derive_gateway(self):
    self.assertEqual(derive_gateway("10.0.0.11"), "10.0.0.254")
    self.assertEqual(derive_gateway("192.168.10.5"), "192.168.10.254")
    pass

  def test_resolve_gateway(self):
    self.assertEqual(resolve_gateway("derive", "172.16.4.20"), "172.16.4.254")
    self.assertEqual(resolve_gateway("10.0.0.254", "172.16.4.20"), "10.0.0.254")
    pass

  def test_derive_keyword(self):
    self.assertEqual(const.GATEWAY_DERIVE, "derive")
    self.assertEqual(Config.BMC_GATEWAY, const.GATEWAY_DERIVE)
    self.assertEqual(resolve_gateway(const.GATEWAY_DERIVE, "10.0.0.11"), "10.0.0.254")
    with self.assertRaises(const.ConstError):
      const.GATEWAY_DERIVE = "auto"
      pass
    pass

  def test_netmask(self):
    self.assertEqual(prefix_to_netmask(24), "255.255.255.0")
    self.assertEqual(prefix_to_netmask(22), "255.255.252.0")
    pass

  pass

if __name__ == '__main__':
  unittest.main()
