"""
Column types shared by the models
"""

from sqlalchemy import DateTime, Double, String, Text
from sqlalchemy.dialects import mysql, postgresql
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.expression import FunctionElement

# TEXT column; MySQL needs an explicit length for VARCHAR keys and
# indexes, 191 keeps utf8mb4 indexes under the 767 byte limit
ShortText = Text().with_variant(String(191), "mysql", "mariadb")

# DOUBLE PRECISION everywhere, plain Float is single precision on MySQL
Money = Double()
Coordinate = Double()

# Millisecond precision timestamps
Timestamp = (
    DateTime()
    .with_variant(postgresql.TIMESTAMP(precision=3), "postgresql")
    .with_variant(mysql.DATETIME(fsp=3), "mysql", "mariadb")
)


class current_timestamp(FunctionElement):
    """CURRENT_TIMESTAMP at the precision of ``Timestamp``"""
    type = DateTime()
    inherit_cache = True


@compiles(current_timestamp)
def _current_timestamp(element, compiler, **kw):
    return "CURRENT_TIMESTAMP"


# MySQL rejects a default whose precision differs from the column's
@compiles(current_timestamp, "mysql")
@compiles(current_timestamp, "mariadb")
def _current_timestamp_mysql(element, compiler, **kw):
    return "CURRENT_TIMESTAMP(3)"
