"""
Step definitions for row splitting features
"""

from behave import given, then, when  # type: ignore[import-untyped]

from splittable import ConfigError, SplitSettings


@given('the row items "{items}"')  # type: ignore[misc]
def step_given_row_items(context, items):
    """Store the row items (space separated labels)"""
    context.items = items.split()


@given("the split settings:")  # type: ignore[misc]
def step_given_split_settings(context):
    """Parse split settings from YAML, keeping any configuration error"""
    try:
        context.settings = SplitSettings.from_yaml(context.text)
    except ConfigError as e:
        context.error = e


@when("the row is laid out at width {width:d}")  # type: ignore[misc]
def step_when_laid_out(context, width):
    """Partition the stored items at the given width"""
    context.result = context.settings.partition(context.items, width)


@then("the rows are:")  # type: ignore[misc]
def step_then_rows_are(context):
    """Compare rows against a one-column table of space separated labels"""
    expected = [row["row"].split() for row in context.table]
    assert context.result == expected, f"Expected {expected}, got {context.result}"


@then("the row count is {count:d}")  # type: ignore[misc]
def step_then_row_count(context, count):
    """Check the number of rows"""
    assert len(context.result) == count, (
        f"Expected {count} rows, got {len(context.result)}: {context.result}"
    )


@then('the settings are rejected with "{message}"')  # type: ignore[misc]
def step_then_rejected(context, message):
    """Check that loading the settings failed with the given message"""
    assert hasattr(context, "error"), "Expected a configuration error"
    assert message in str(context.error), f"Unexpected error: {context.error}"
