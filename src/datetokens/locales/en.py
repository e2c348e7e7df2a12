"""English locale data. Installed eagerly as the default locale."""

from datetokens.localization.types import LocaleData

LOCALE = LocaleData(
    name="English",
    months=(
        "January",
        "February",
        "March",
        "April",
        "May",
        "June",
        "July",
        "August",
        "September",
        "October",
        "November",
        "December",
    ),
    months_short=(
        "Jan", "Feb", "Mar", "Apr", "May", "Jun",
        "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
    ),
    weekdays=(
        "Sunday",
        "Monday",
        "Tuesday",
        "Wednesday",
        "Thursday",
        "Friday",
        "Saturday",
    ),
    weekdays_short=("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"),
    weekdays_min=("Su", "Mo", "Tu", "We", "Th", "Fr", "Sa"),
    meridiem_lower=("am", "pm"),
    meridiem_upper=("AM", "PM"),
)
