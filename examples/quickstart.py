"""Quickstart example for datetokens.

This example demonstrates template formatting, locale switching and the
built-in named formatters.

Note: Outputs shown assume the aware datetime below; naive datetimes and
timestamps are shown in the machine's local time zone.
"""

from datetime import datetime, timedelta, timezone

from datetokens import format_date, get_locale, list_names, set_locale

moment = datetime(2024, 7, 23, 14, 35, 45, 123000, tzinfo=timezone(timedelta(hours=2)))

# Example 1: Token templates
print("=" * 50)
print("Example 1: Token Templates")
print("=" * 50)

print(format_date("YYYY-MMMM-DDD-HH-mm-ss", moment))
# Output: 2024-July-Tuesday-14-35-45

print(format_date("YY-M-D", moment))
# Output: 24-7-Tu

print(format_date("h:mm a (Z)", moment))
# Output: 2:35 pm (+02:00)

# Example 2: Other date inputs
print("\n" + "=" * 50)
print("Example 2: Date Inputs")
print("=" * 50)

print(format_date("YYYY-MM-dd HH:mm ZZ", "2024-07-23T14:35:45+02:00"))
# Output: 2024-07-23 14:35 +0200

print(format_date("YYYY-MM-dd", 0))
# Output: 1970-01-01 (or 1969-12-31 west of UTC)

print(format_date("YYYY"))
# Output: the current year

# Example 3: Built-in named formatters
print("\n" + "=" * 50)
print("Example 3: Named Formatters")
print("=" * 50)

for name in list_names():
    print(f"{name:>14}: {format_date(name, moment)}")
# Output:
#        ISODate: 2024-07-23
#        ISOTime: 14:35:45
#    ISODateTime: 2024-07-23T14:35:45
#  ISODateTimeTZ: 2024-07-23T14:35:45+02:00

# Example 4: Locales
print("\n" + "=" * 50)
print("Example 4: Locales")
print("=" * 50)

set_locale("pl")
print(format_date("DDD, MMMM d, YYYY", moment))
# Output: wtorek, lipiec 23, 2024

set_locale("de")  # not bundled, built from CLDR data
print(format_date("DDD, d. MMMM YYYY", moment))
# Output: Dienstag, 23. Juli 2024

set_locale("xx")  # unknown: logged, nothing changes
print(get_locale())
# Output: de

set_locale("en")
