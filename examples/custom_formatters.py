"""Custom formatter examples for datetokens.

Shows registering named formatters, building per-locale formatters and
composing single tokens with pad() for formats no template can express.
"""

from datetime import datetime, timedelta, timezone

from datetokens import (
    DateFormatter,
    MissingTemplateError,
    create_formatter,
    format_date,
    pad,
    register,
    set_locale,
    tokens,
)

moment = datetime(2024, 7, 23, 14, 35, 45, 123000, tzinfo=timezone(timedelta(hours=2)))

# Example 1: Per-locale formatter
print("=" * 50)
print("Example 1: create_formatter")
print("=" * 50)

long_date = create_formatter({
    "en": "MMMM d, YYYY",
    "pl": "d MMMM YYYY",
    "default": "YYYY-MM-dd",
})

print(long_date(moment))
# Output: July 23, 2024

set_locale("pl")
print(long_date(moment))
# Output: 23 lipiec 2024

set_locale("de")
print(long_date(moment))
# Output: 2024-07-23
set_locale("en")

# Example 2: Named formatters built from tokens
print("\n" + "=" * 50)
print("Example 2: register")
print("=" * 50)


def quarter(instant: datetime) -> str:
    return f"Q{(tokens.M(instant) - 1) // 3 + 1} {tokens.YYYY(instant)}"


def iso_week(instant: datetime) -> str:
    year, week, _ = instant.isocalendar()
    return f"{year}-W{pad(week)}"


register("quarter", quarter)
register("week", iso_week)
register("clock", "hh:mm A")

print(format_date("quarter", moment))
# Output: Q3 2024
print(format_date("week", moment))
# Output: 2024-W30
print(format_date("clock", moment))
# Output: 02:35 PM

# Example 3: Missing templates
print("\n" + "=" * 50)
print("Example 3: Missing Templates")
print("=" * 50)

polish_only = create_formatter({"pl": "d MMMM"})
try:
    polish_only(moment)
except MissingTemplateError as e:
    print(e.diagnostic.format_error() if e.diagnostic else e)
# Output:
# error[TEMPLATE_MISSING]: No template for locale 'en' and no 'default' template
#   = help: Add a 'default' entry to the formats mapping

# Example 4: Independent contexts
print("\n" + "=" * 50)
print("Example 4: DateFormatter")
print("=" * 50)

polish = DateFormatter("pl", builtins=False)
print(polish.format_date("DDD", moment), "/", format_date("DDD", moment))
# Output: wtorek / Tuesday
print(polish.list_names())
# Output: []
