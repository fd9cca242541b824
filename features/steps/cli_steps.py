"""
Step definitions for cf acceptance tests.
"""

from behave import given, then, when

from cf_dns.core.dns_manager import DNSManager
from cf_dns.core.record_manager import Outcome
from cf_dns.core.session import Session


def _manager(context):
    if not hasattr(context, "manager"):
        context.session = Session(
            context.test_config,
            interactive=False,
            console=context.console,
            environ=context.environ,
        )
        context.manager = DNSManager(context.session)
    return context.manager


def _output(context):
    return context.console.file.getvalue()


@given("the cf tool is configured with the mock provider")
def step_impl(context):
    """Create a fresh session and dispatcher for the scenario."""
    _manager(context)


@given('the environment variable "{variable}" is not set')
def step_impl(context, variable):
    context.environ.pop(variable, None)


@given("the zone contains these records")
def step_impl(context):
    """Create records directly through the provider."""
    session = _manager(context).session
    api = session.get_api()
    zone_id = session.get_zone()
    for row in context.table:
        api.create_record(zone_id, row["type"], row["name"], row["content"])


@when('I run "{line}"')
def step_impl(context, line):
    context.outcomes.append(_manager(context).process_line(line))


@then("no error is reported")
def step_impl(context):
    output = _output(context)
    assert "Command not found." not in output, output
    assert "Command ambiguous." not in output, output
    assert "Error:" not in output, output


@then("the output is")
def step_impl(context):
    expected = context.text.strip() + "\n"
    assert _output(context) == expected, _output(context)


@then('the output contains "{text}"')
def step_impl(context, text):
    assert text in _output(context), _output(context)


@then('the zone has {count:d} "{record_type}" record named "{name}"')
@then('the zone has {count:d} "{record_type}" records named "{name}"')
def step_impl(context, count, record_type, name):
    session = context.session
    records = session.get_api().list_records(session.get_zone(), record_type, name)
    assert len(records) == count, records


@then('the zone "{zone}" has {count:d} "{record_type}" record named "{name}"')
def step_impl(context, zone, count, record_type, name):
    api = context.session.get_api()
    records = api.list_records(api.zone_id_by_name(zone), record_type, name)
    assert len(records) == count, records


@then("the session ends")
def step_impl(context):
    assert context.outcomes[-1] is Outcome.QUIT
