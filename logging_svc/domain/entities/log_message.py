from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class LogMessage(BaseModel):
    """A log record as it travels between publisher and consumer.

    Serialized with camelCase keys (``serviceName``); either naming is
    accepted when reading one back.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    level: str
    message: str
    service_name: str
    timestamp: str
