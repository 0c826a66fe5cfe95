import logging
import typing

from graphql import GraphQLError, GraphQLFormattedError

DEFAULT_LOGGER = logging.getLogger(__name__)


class SchemaValidationError(Exception):
    """Raised when the GraphQL schema fails validation."""

    pass


class SchemaConfigurationError(Exception):
    """Raised when the registered node types disagree with the schema.

    Every object type that implements `Node` must have exactly one registry
    entry and every registry entry must name such a type. A mismatch means a
    data accessor can hand back a record the schema cannot serialize, so it
    is reported at startup rather than at query time.
    """

    pass


class ResolverRegistrationError(Exception):
    """Raised when a resolver is attached to a type or field that does not exist."""

    pass


def format_errors(
    errors: typing.Optional[typing.List[GraphQLError]] = None,
    logger: typing.Optional[logging.Logger] = None,
    level: int = logging.DEBUG,
) -> typing.Optional[typing.List[GraphQLFormattedError]]:
    """Return a list of formatted errors suitable for a JSON response.

    Errors that wrap an unexpected exception (anything that is not a plain
    GraphQLError raised during parsing or validation) are logged so they
    are not lost when the response only carries the message.
    """
    if not errors:
        return None

    logger = logger or DEFAULT_LOGGER

    formatted_errors: typing.List[GraphQLFormattedError] = []

    for err in errors:
        if err.original_error is not None:
            log_error(err, logger, level)

        formatted_errors.append(err.formatted)
    return formatted_errors


def log_error(
    error: GraphQLError,
    logger: logging.Logger,
    level: int,
):
    if tb := error.__traceback__:
        while tb and tb.tb_next:
            tb = tb.tb_next
        logger.log(level, f"{error} \nContext={tb.tb_frame.f_locals!r}")
    else:
        logger.log(level, f"{error}")
