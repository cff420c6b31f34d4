from behave import given, when, then

from hls_playlist.parser import parse_playlist
from hls_playlist.serializer import render_playlist
from hls_playlist.validator import validate


@given('the playlist')
def step_given_playlist(context):
    context.source = context.text


@given('a playlist starting with #EXTM3U followed by "{line}"')
def step_given_single_line(context, line):
    context.source = f"#EXTM3U\n{line}\n"


@when('I parse it')
def step_parse(context):
    context.result = parse_playlist(context.source)
    assert context.result.is_clean, context.result.diagnostics


@then('there are {count:d} tags')
def step_tag_count(context, count):
    assert len(context.result.playlist) == count, f"Expected {count}, but got {len(context.result.playlist)}"


@then('the playlist has no violations')
def step_no_violations(context):
    violations = validate(context.result.playlist)
    assert violations == [], f"Expected no violations, but got {violations}"


@then('the only violation is {name}')
def step_single_violation(context, name):
    violations = validate(context.result.playlist)
    assert [type(v).__name__ for v in violations] == [name], f"Expected [{name}], but got {violations}"


@then('rendering and parsing it again gives the same playlist')
def step_round_trip(context):
    again = parse_playlist(render_playlist(context.result.playlist))
    assert again.playlist == context.result.playlist
