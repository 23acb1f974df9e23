import gettext
import logging
from functools import lru_cache

from jinja2 import Environment, PackageLoader, select_autoescape
from markupsafe import Markup, escape

from app.core.config import settings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def load_translations(domain: str) -> gettext.NullTranslations:
    """gettext catalog for `domain` in the configured language; untranslated if none is installed."""
    translations = gettext.translation(
        domain,
        localedir=str(settings.locale_dir),
        languages=[settings.language],
        fallback=True,
    )
    if type(translations) is gettext.NullTranslations:
        logger.debug("no %r catalog for %r in %s", domain, settings.language, settings.locale_dir)
    return translations


class EscapedTranslations:
    """
    Catalog wrapper whose lookups come back HTML-escaped.

    The returned Markup still escapes whatever is substituted into it with `%`.
    """

    def __init__(self, translations: gettext.NullTranslations):
        self._translations = translations

    def gettext(self, message: str) -> Markup:
        return escape(self._translations.gettext(message))

    def ngettext(self, singular: str, plural: str, n: int) -> Markup:
        return escape(self._translations.ngettext(singular, plural, n))

    def pgettext(self, context: str, message: str) -> Markup:
        return escape(self._translations.pgettext(context, message))

    def npgettext(self, context: str, singular: str, plural: str, n: int) -> Markup:
        return escape(self._translations.npgettext(context, singular, plural, n))


def build_environment(package: str, translations: gettext.NullTranslations) -> Environment:
    """
    Jinja2 environment for one block package's `templates/` directory.

    Autoescaping is always on for HTML. Translated text is escaped by
    EscapedTranslations, and newstyle gettext escapes the values substituted
    into it.
    """
    env = Environment(
        loader=PackageLoader(package, "templates"),
        autoescape=select_autoescape(["html"]),
        extensions=["jinja2.ext.i18n"],
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.install_gettext_translations(EscapedTranslations(translations), newstyle=True)
    return env


@lru_cache(maxsize=None)
def get_environment(package: str, domain: str) -> Environment:
    return build_environment(package, load_translations(domain))
