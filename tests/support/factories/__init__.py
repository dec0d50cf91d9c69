# Data factories for test data generation

from tests.support.factories.channel_factory import (
    create_channel,
    create_channels,
)
from tests.support.factories.publication_factory import (
    create_post,
    create_publication,
)

__all__ = [
    # Channel factories
    "create_channel",
    "create_channels",
    # Scheduling factories
    "create_post",
    "create_publication",
]
