import setuptools, sys, os

with open("README.rst", "r") as fh:
  long_description = fh.read()

# The bring-up runs on the Ubuntu server installed on the new machine,
# which comes with Python 3.8 or later.
python_version = sys.version_info
need_python_version = (3, 8)

if python_version < need_python_version:
  raise RuntimeError("mgmt_bringup requires Python version %d.%d or higher"
                     % need_python_version)

sys.path.append(os.getcwd())
from mgmt_bringup.version import *

setuptools.setup(
  name="mgmt_bringup",
  version=BRINGUP_VERSION,
  description="Management network bring-up: netplan and IPMI addresses from the serial number",
  long_description=long_description,
  long_description_content_type="text/x-rst",
  packages=['mgmt_bringup',
            'mgmt_bringup.bin',
            'mgmt_bringup.components',
            'mgmt_bringup.config',
            'mgmt_bringup.lib',
            'mgmt_bringup.ops'],
  include_package_data=True,
  python_requires=">=3.8",
  install_requires=[
    'PyYAML>=5.1',
  ],
  extras_require={
    'test': ['pytest'],
  },
  entry_points={
    'console_scripts': [
      'mgmt-bringup=mgmt_bringup.bin.set_mgmt_bmc_ip:entry_point',
    ],
  },
  classifiers=[
    "Programming Language :: Python :: 3",
    "License :: OSI Approved :: MIT License",
    "Operating System :: POSIX :: Linux",
  ],
)
