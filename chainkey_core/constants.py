# chainkey_core/constants.py

# SS58 address layout: [prefix][account id][checksum]
SS58_PREFIX = 42
SS58_DOMAIN = b"SS58PRE"
ACCOUNT_ID_LEN = 32
CHECKSUM_LEN = 2
ENCODED_ACCOUNT_LEN = 1 + ACCOUNT_ID_LEN + CHECKSUM_LEN

# twox-128 storage keys: one xxHash64 per seed, low half first
STORAGE_KEY_SEEDS = (0, 1)
STORAGE_KEY_SEPARATOR = b" "

CONFIG_PREFIX_ENV = "CHAINKEY_SS58_PREFIX"
