"""
utils package
-------------
Slug and calendar helpers.
"""
from dayof.utils.dates import format_date, month_name, rolled_date
from dayof.utils.slugify import slugify

__all__ = ["format_date", "month_name", "rolled_date", "slugify"]
