BRINGUP_VERSION = "0.3.0"
