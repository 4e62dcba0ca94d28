from datetime import datetime, timedelta, timezone

DEFAULT_CLIENT_ID = "default"

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class ConfigurationError(RuntimeError):
    """Raised at startup when required process configuration is missing or invalid."""


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def epoch_millis(moment: datetime | None = None) -> int:
    moment = moment or utc_now()
    return (moment - _EPOCH) // timedelta(milliseconds=1)


def iso_timestamp(moment: datetime | None = None) -> str:
    moment = moment or utc_now()
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
