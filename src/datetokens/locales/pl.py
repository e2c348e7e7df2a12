"""Polish locale data.

Month names are in the nominative case ("lipiec", not "lipca"), which is
what a stand-alone MMMM token should print.
"""

from datetokens.localization.types import LocaleData

LOCALE = LocaleData(
    name="Polski",
    months=(
        "styczeń",
        "luty",
        "marzec",
        "kwiecień",
        "maj",
        "czerwiec",
        "lipiec",
        "sierpień",
        "wrzesień",
        "październik",
        "listopad",
        "grudzień",
    ),
    months_short=(
        "sty", "lut", "mar", "kwi", "maj", "cze",
        "lip", "sie", "wrz", "paź", "lis", "gru",
    ),
    weekdays=(
        "niedziela",
        "poniedziałek",
        "wtorek",
        "środa",
        "czwartek",
        "piątek",
        "sobota",
    ),
    weekdays_short=("ndz", "pon", "wto", "śro", "czw", "pią", "sob"),
    weekdays_min=("Nd", "Pn", "Wt", "Śr", "Cz", "Pt", "So"),
    meridiem_lower=("am", "pm"),
    meridiem_upper=("AM", "PM"),
)
