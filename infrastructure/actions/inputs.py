import os


def _input_env_name(name: str) -> str:
    return f"INPUT_{name.replace(' ', '_').upper()}"


def get_input(name: str, *, required: bool = False) -> str:
    value = os.getenv(_input_env_name(name), "").strip()
    if required and not value:
        raise RuntimeError(f"Input required and not supplied: {name}")
    return value


def get_multiline_input(name: str, *, required: bool = False) -> list[str]:
    raw_value = get_input(name, required=required)
    return [line.strip() for line in raw_value.splitlines() if line.strip()]
