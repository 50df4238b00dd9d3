"""Well-known setting keys and their default values."""

from typing import Dict

CONFIG_POOL_NAME = "pool_name"
CONFIG_POOL_CONFIG_NAME = "config_name"
CONFIG_WALLET_NAME = "wallet_name"
CONFIG_WALLET_TYPE = "wallet_type"
CONFIG_AGENT_ENDPOINT = "agent_endpoint"

DEFAULTS: Dict[str, str] = {
    CONFIG_POOL_NAME: "pool1",
    CONFIG_POOL_CONFIG_NAME: "config1",
    CONFIG_WALLET_NAME: "wallet1",
    CONFIG_WALLET_TYPE: "default",
    CONFIG_AGENT_ENDPOINT: "http://127.0.0.1:8080",
}

KNOWN_KEYS = frozenset(DEFAULTS)

__all__ = [
    "CONFIG_POOL_NAME",
    "CONFIG_POOL_CONFIG_NAME",
    "CONFIG_WALLET_NAME",
    "CONFIG_WALLET_TYPE",
    "CONFIG_AGENT_ENDPOINT",
    "DEFAULTS",
    "KNOWN_KEYS",
]
