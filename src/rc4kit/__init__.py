from .version import __version__ as __version__

__title__ = "rc4kit"
__description__ = "A small toolkit for RC4 stream encryption and decryption."
__author__ = "rc4kit contributors"
__license__ = "Apache-2.0"
