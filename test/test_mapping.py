import unittest
import tempfile
import shutil
import os
import io
import contextlib
from unittest import mock

from fakes import FakeInventory
from mgmt_bringup.bin.set_mgmt_bmc_ip import main
from mgmt_bringup.config.mapping import read_mapping_rows, find_mapping_row, lookup_addresses, MappingRow
from mgmt_bringup.errors import MappingFileNotFound, MappingFileUnreadable, AddressNotFound, MappingError


example_mapping = """ABC123 10.0.0.11 192.168.10.5
DEF456 10.0.0.12 192.168.10.6

GHI789 10.0.0.13 192.168.10.7
ABC123 10.0.0.99 192.168.10.99
BROKEN 10.0.0.14
Dell-Inc.-7XQ2 10.0.1.15 192.168.11.15
"""


class Test_mapping(unittest.TestCase):

  def setUp(self):
    self.test_dir = tempfile.mkdtemp()
    self.mapping_file = os.path.join(self.test_dir, "mapping.txt")
    with open(self.mapping_file, "w") as mapping:
      mapping.write(example_mapping)
      pass
    pass

  def tearDown(self):
    shutil.rmtree(self.test_dir)
    pass

  def test_rows_in_file_order(self):
    rows = list(read_mapping_rows(self.mapping_file))
    self.assertEqual(len(rows), 6)
    self.assertEqual(rows[0], MappingRow("ABC123", "10.0.0.11", "192.168.10.5"))
    self.assertEqual(rows[2].serial_number, "GHI789")
    self.assertEqual(rows[4], MappingRow("BROKEN", "10.0.0.14", ""))
    pass

  def test_lookup(self):
    self.assertEqual(lookup_addresses("DEF456", self.mapping_file), ("10.0.0.12", "192.168.10.6"))
    self.assertEqual(lookup_addresses("Dell-Inc.-7XQ2", self.mapping_file), ("10.0.1.15", "192.168.11.15"))
    pass

  def test_first_match_wins(self):
    self.assertEqual(lookup_addresses("ABC123", self.mapping_file), ("10.0.0.11", "192.168.10.5"))
    pass

  def test_exact_match_only(self):
    with self.assertRaises(AddressNotFound):
      lookup_addresses("ABC12", self.mapping_file)
      pass
    with self.assertRaises(AddressNotFound):
      lookup_addresses("abc123", self.mapping_file)
      pass
    pass

  def test_not_found(self):
    with self.assertRaises(AddressNotFound) as ctx:
      lookup_addresses("NOPE", self.mapping_file)
      pass
    self.assertIn("NOPE", str(ctx.exception))
    pass

  def test_malformed_row_is_not_found(self):
    with self.assertRaises(AddressNotFound):
      lookup_addresses("BROKEN", self.mapping_file)
      pass
    pass

  def test_missing_file(self):
    missing = os.path.join(self.test_dir, "no-such-mapping.txt")
    with self.assertRaises(MappingFileNotFound):
      find_mapping_row("ABC123", missing)
      pass
    with self.assertRaises(MappingError):
      lookup_addresses("ABC123", missing)
      pass
    pass

  def test_directory_is_not_a_mapping_file(self):
    with self.assertRaises(MappingFileNotFound):
      lookup_addresses("ABC123", self.test_dir)
      pass
    pass

  def test_empty_file(self):
    empty = os.path.join(self.test_dir, "empty.txt")
    open(empty, "w").close()
    self.assertIsNone(find_mapping_row("ABC123", empty))
    pass

  def _write_bytes(self, content):
    path = os.path.join(self.test_dir, "latin1.txt")
    with open(path, "wb") as mapping:
      mapping.write(content)
      pass
    return path

  def test_non_utf8_row(self):
    path = self._write_bytes(b"ABC123 10.0.0.11 192.168.10.5\nSRV\xe9 10.0.0.12 192.168.10.6\nDEF456 10.0.0.13 192.168.10.7\n")
    self.assertEqual(lookup_addresses("ABC123", path), ("10.0.0.11", "192.168.10.5"))
    self.assertEqual(lookup_addresses("DEF456", path), ("10.0.0.13", "192.168.10.7"))
    with self.assertRaises(AddressNotFound):
      lookup_addresses("NOPE", path)
      pass
    pass

  def test_non_utf8_row_from_command_line(self):
    path = self._write_bytes(b"SRV\xe9 10.0.0.12 192.168.10.6\n")
    stderr = io.StringIO()
    with mock.patch("mgmt_bringup.bin.set_mgmt_bmc_ip.is_root", return_value=True), \
         contextlib.redirect_stdout(io.StringIO()), contextlib.redirect_stderr(stderr):
      status = main(["-f", path, "--netplan-dir", self.test_dir], inventory=FakeInventory("NOPE"))
      pass
    self.assertEqual(status, 1)
    self.assertIn("Could not find IP addresses for serial number 'NOPE'", stderr.getvalue())
    self.assertNotIn("Traceback", stderr.getvalue())
    pass

  def test_unreadable_file(self):
    with mock.patch("builtins.open", side_effect=PermissionError(13, "Permission denied")):
      with self.assertRaises(MappingFileUnreadable) as ctx:
        lookup_addresses("ABC123", self.mapping_file)
        pass
      pass
    self.assertIsInstance(ctx.exception, MappingError)
    self.assertIn("not readable", str(ctx.exception))
    pass

  pass

if __name__ == '__main__':
  unittest.main()
