"""
This package contains all modules related to parsing and decoding sensor
advertisements broadcast by RuuviTag beacons.

Sub-packages handle specific data formats:

- ``advertisement``: Manufacturer-data payload decoding (data formats 3 and 5),
  format dispatch and serialization.
"""
