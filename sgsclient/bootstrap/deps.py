import json
from functools import lru_cache

from pydantic import ValidationError

from sgsclient.bootstrap.config.settings import ClientSettings
from sgsclient.core.context import ConnectionContext
from sgsclient.core.ports.io import IOInterest


@lru_cache
def get_config() -> ClientSettings:
    try:
        return ClientSettings()  # type: ignore[call-arg]
    except FileNotFoundError as ex:
        raise SystemExit(f"Provide a correct configuration file path: {ex}")
    except ValidationError as ex:
        msg = ["Configuration validation failed:"]
        errs = json.loads(ex.json())
        for err in errs:
            msg.append(f"  {'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}")
        raise SystemExit("\n".join(msg))


def build_context(
    settings: ClientSettings | None = None,
    interest: IOInterest | None = None,
) -> ConnectionContext:
    """
    Build a fresh ConnectionContext from client settings.

    A new context is returned on every call: contexts are never shared
    between connections.
    """
    settings = settings or get_config()
    return ConnectionContext.from_interest(
        settings.hostname,
        settings.port,
        interest,
        hostname_capacity=settings.hostname_capacity,
    )
