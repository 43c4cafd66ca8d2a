"""In-place byte-shift encryption and decryption of files and directory trees."""

__version__ = "0.1.0"