"""Signup form with dependent fields.

Shows builtin templates, a custom state, a cascade through an intermediate
field, and inherit_state.

    newsletter [x] --checked--> frequency (show)
    frequency "weekly" --weekly--> weekday (show)
    weekday (visible) --visible--> reminder (enable)
"""

import logging

from field_deps import Field, FieldDependencies

logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


def build_form():
    engine = FieldDependencies(builtins=True)
    engine.add_state("weekly", lambda host: host.value == "weekly", "Weekly frequency chosen")

    newsletter = Field("newsletter")
    frequency = Field("frequency", visible=False)
    weekday = Field("weekday", visible=False)
    reminder = Field("reminder", enabled=False)

    engine.create_relationship(newsletter, "checked", frequency, "show")
    engine.create_relationship(frequency, "weekly", weekday, "show")
    engine.create_relationship(weekday, "visible", reminder, "enable")

    # The reminder also reacts to everything that shows the weekday picker.
    engine.create_relationship(weekday, "filled", reminder, "show", inherit_state=True)

    return engine, newsletter, frequency, weekday, reminder


def main():
    engine, newsletter, frequency, weekday, reminder = build_form()

    newsletter.checked = True
    print(frequency)

    frequency.value = "weekly"
    print(weekday)
    print(reminder)

    print(engine.describe())


if __name__ == "__main__":
    main()
