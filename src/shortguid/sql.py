"""PostgreSQL functions equivalent to encode() and non-strict decode().

The rendered functions let queries convert between ``uuid`` columns and
ShortGuid strings in the database::

    SELECT public.encode_short_guid(id) FROM catalog.tb_manufacturer;
    SELECT * FROM catalog.tb_manufacturer
    WHERE id = public.decode_short_guid('00amyWGct0y_ze4lIsj2Mw');

PostgreSQL stores a uuid in RFC byte order, so both functions swap the first
three fields into GUID order before base64 (the swap is its own inverse).
"""

import logging
import re

logger = logging.getLogger(__name__)

IDENTIFIER_REGEX = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

# Reorders the 32 hex digits in "h" between RFC and GUID byte order.
_SWAP_BYTE_ORDER = (
    "substr(h, 7, 2) || substr(h, 5, 2) || substr(h, 3, 2) || substr(h, 1, 2)\n"
    "        || substr(h, 11, 2) || substr(h, 9, 2)\n"
    "        || substr(h, 15, 2) || substr(h, 13, 2)\n"
    "        || substr(h, 17, 16)"
)


def _check_schema(schema: str) -> str:
    if not IDENTIFIER_REGEX.fullmatch(schema):
        raise ValueError(
            f"Invalid schema name: {schema!r}. "
            f"Use letters, digits and underscores, not starting with a digit."
        )
    return schema


def render_postgres_functions(schema: str = "public") -> str:
    """Render CREATE FUNCTION statements for encode/decode.

    Args:
        schema: Schema to create the functions in

    Returns:
        SQL script

    Raises:
        ValueError: If schema is not a plain SQL identifier
    """
    schema = _check_schema(schema)
    logger.debug(f"Rendering ShortGuid functions for schema {schema}")

    return f"""-- Converts a uuid to a ShortGuid string.
CREATE OR REPLACE FUNCTION {schema}.encode_short_guid(value uuid)
RETURNS varchar(22)
LANGUAGE sql IMMUTABLE STRICT PARALLEL SAFE
AS $$
    SELECT left(
        translate(encode(decode(
        {_SWAP_BYTE_ORDER},
            'hex'), 'base64'), '+/', '-_'),
        22
    )
    FROM (SELECT replace(value::text, '-', '') AS h) AS hex
$$;

-- Converts a ShortGuid string to a uuid. Does not reject aliased encodings.
CREATE OR REPLACE FUNCTION {schema}.decode_short_guid(data varchar)
RETURNS uuid
LANGUAGE plpgsql IMMUTABLE STRICT PARALLEL SAFE
AS $$
DECLARE
    h text;
BEGIN
    h := encode(decode(translate(data, '-_', '+/') || '==', 'base64'), 'hex');
    IF length(h) <> 32 THEN
        RAISE EXCEPTION 'Invalid ShortGuid encoding ''%'': decodes to % bytes, expected 16',
            data, length(h) / 2
            USING ERRCODE = 'invalid_parameter_value';
    END IF;
    RETURN (
        {_SWAP_BYTE_ORDER}
    )::uuid;
END
$$;
"""


def render_drop_functions(schema: str = "public") -> str:
    """Render DROP FUNCTION statements matching render_postgres_functions()."""
    schema = _check_schema(schema)

    return (
        f"DROP FUNCTION IF EXISTS {schema}.decode_short_guid(varchar);\n"
        f"DROP FUNCTION IF EXISTS {schema}.encode_short_guid(uuid);\n"
    )
