"""Quickstart example for i18ntree.

This example demonstrates basic usage of i18ntree: keys and scopes,
defaults, interpolation, pluralization, bulk lookups and validation
messages.

Note: Missing translations render as "translation missing: ..." markers by
default. Pass I18nConfig(raise_on_missing=True) in development to fail
loudly instead.
"""

from i18ntree import DictLoader, I18n, I18nConfig, Key
from i18ntree.models import ErrorCollection, ErrorMessageResolver, ModelMetadata
from i18ntree.models import default_messages_loader
from i18ntree.runtime import PluralRules

TRANSLATIONS = {
    "en": {
        "greetings": {"hello": "Hello, {{name}}!", "welcome": "Welcome to i18ntree!"},
        "inbox": {"one": "You have one message.", "other": "You have {{count}} messages."},
        "activerecord": {"models": {"admin": "Administrator"}},
    },
    "pl": {
        "greetings": {"hello": "Cześć, {{name}}!"},
        "inbox": {
            "one": "Masz jedną wiadomość.",
            "few": "Masz {{count}} wiadomości.",
            "many": "Masz {{count}} wiadomości.",
            "other": "Masz {{count}} wiadomości.",
        },
    },
}

plural_rules = PluralRules()
plural_rules.register_cldr("pl")
i18n = I18n(
    I18nConfig(default_locale="en"),
    loaders=[default_messages_loader(), DictLoader(TRANSLATIONS)],
    plural_rules=plural_rules,
)

# Example 1: Keys and scopes
print("=" * 50)
print("Example 1: Keys and Scopes")
print("=" * 50)

print(i18n.t("greetings.welcome"))
print(i18n.t("welcome", scope="greetings"))
print(i18n.t("welcome", scope=["greetings"]))
# Output: Welcome to i18ntree! (three times)

# Example 2: Interpolation
print("\n" + "=" * 50)
print("Example 2: Interpolation")
print("=" * 50)

print(i18n.t("greetings.hello", name="Alice"))
# Output: Hello, Alice!

# Example 3: Pluralization
print("\n" + "=" * 50)
print("Example 3: Pluralization (English and Polish)")
print("=" * 50)

for count in (0, 1, 2, 5):
    print(i18n.t("inbox", count=count), "|", i18n.t("inbox", count=count, locale="pl"))

# Example 4: Defaults
print("\n" + "=" * 50)
print("Example 4: Default Chains")
print("=" * 50)

print(i18n.t("greetings.goodbye", default=[Key("greetings.farewell"), "Goodbye!"]))
# Output: Goodbye!
print(i18n.t("greetings.goodbye", default=Key("greetings.welcome")))
# Output: Welcome to i18ntree!
print(i18n.t("greetings.goodbye"))
# Output: translation missing: en.greetings.goodbye

# Example 5: Bulk and namespace lookups
print("\n" + "=" * 50)
print("Example 5: Bulk and Namespace Lookups")
print("=" * 50)

print(i18n.t(["odd", "even"], scope="activerecord.errors.messages"))
# Output: ['must be odd', 'must be even']
print(dict(i18n.t("greetings")))

# Example 6: Ambient locale
print("\n" + "=" * 50)
print("Example 6: Ambient Locale")
print("=" * 50)

with i18n.locale_scope("pl"):
    print(i18n.t("greetings.hello", name="Ola"))
# Output: Cześć, Ola!

# Example 7: Validation messages
print("\n" + "=" * 50)
print("Example 7: Validation Messages")
print("=" * 50)

errors = ErrorCollection(ErrorMessageResolver(i18n), ModelMetadata.from_names("Admin", "User"))
errors.add("name", "blank")
errors.add("password", "too_short", count=8)
errors.add_to_base("Account is locked")
for line in errors.full_messages():
    print(line)
# Output:
# Name can't be blank
# Password is too short (minimum is 8 characters)
# Account is locked
