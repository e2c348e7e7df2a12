"""Bundled locale data modules.

Each module is named after its locale code and exposes a module-level
``LOCALE`` attribute holding a LocaleData instance. ModuleLocaleLoader
resolves ``datetokens.locales.<code>`` on demand, so adding a locale means
adding a module here.
"""
