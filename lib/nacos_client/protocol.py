from __future__ import annotations

CONFIGS_PATH = "/nacos/v1/cs/configs"
LISTENER_PATH = "/nacos/v1/cs/configs/listener"

LONG_POLL_HEADER = "Long-Pulling-Timeout"
LISTENING_CONFIGS_PARAM = "Listening-Configs"

# Field and record separators of the Listening-Configs value.
FIELD_SEP = "\x02"
RECORD_SEP = "\x01"


def ensure_wire_safe(value: str, field: str) -> str:
    if not isinstance(value, str) or not value:
        raise ValueError(f"{field} must be a non-empty string")
    if FIELD_SEP in value or RECORD_SEP in value:
        raise ValueError(f"{field} must not contain \\x01 or \\x02")
    return value


def config_params(data_id: str, group: str, namespace: str | None) -> dict[str, str]:
    params = {"dataId": data_id, "group": group}
    if namespace is not None:
        params["tenant"] = namespace
    return params


def build_listening_configs(data_id: str, group: str, fingerprint: str, namespace: str | None) -> str:
    """Encode one watched entry as ``dataId STX group STX md5 [STX tenant] SOH``."""
    fields = [data_id, group, fingerprint]
    if namespace is not None:
        fields.append(namespace)
    return FIELD_SEP.join(fields) + RECORD_SEP
