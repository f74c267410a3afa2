"""ORM Models — imported here so Base.metadata knows every table before create_all."""

from linkvault.models.link import Link  # noqa: F401
