"""
# Pattern based formatting of calendars.

# Patterns are composed of letter runs designating a field and literal text.
# Text enclosed in single quotes is always literal; two single quotes produce one.

# [ Pattern Letters ]
# /`y`/
	# Year; `yy` is the two digit year. Negative years are prefixed with `-`
	# in addition to the padded digits.
# /`M`/
	# Month; `MMM` is the abbreviated name and `MMMM` the full name.
# /`d`/
	# Day of month.
# /`E`/
	# Day of week name; abbreviated unless four or more letters are given.
# /`H`/
	# Hour of day.
# /`m`/
	# Minute of hour.
# /`s`/
	# Second of minute.
# /`S`/
	# Millisecond of second.
# /`Z`/
	# The zone offset in the form `+hhmm`.
"""
import functools
import re

from . import core
from . import gregorian
from . import week

iso8601 = "yyyy-MM-dd'T'HH:mm:ss.SSSZ"
rfc1123 = "EEE, dd MMM yyyy HH:mm:ss 'GMT'"
default = "yyyy-MM-ddTHH:mm:ss Z"

models = {
	'iso8601' : iso8601,
	'rfc1123' : rfc1123,
}

aliases = {
	'iso' : 'iso8601',
	'http' : 'rfc1123',
}

tokens = re.compile(r"'(?:[^']|'')*'|y+|M+|d+|E+|H+|m+|s+|S+|Z")

def _number(get):
	def render(calendar, width, get=get):
		return str(get(calendar)).zfill(width)
	return render

def _year(calendar, width):
	y = calendar.get_year()
	if width == 2:
		return '%02d' %(y % 100,)
	# Pad the magnitude; the sign is not counted by the width.
	return ('-' if y < 0 else '') + str(abs(y)).zfill(width)

def _month(calendar, width, names=gregorian.month_names, abbreviations=gregorian.month_abbreviations):
	m = calendar.get_month()
	if width >= 4:
		return names[m-1].capitalize()
	elif width == 3:
		return abbreviations[m-1].capitalize()
	return str(m).zfill(width)

def _weekday(calendar, width, names=week.weekday_names, abbreviations=week.weekday_abbreviations):
	d = calendar.get_day_of_week()
	if width >= 4:
		return names[d-1].capitalize()
	return abbreviations[d-1].capitalize()

def _offset(calendar, width):
	offset = calendar.with_zone().offset(calendar.time())
	sign = '-' if offset < 0 else '+'
	minutes = abs(offset) // core.millis_per_minute
	return '%s%02d%02d' %(sign, minutes // 60, minutes % 60)

renderers = {
	'y': _year,
	'M': _month,
	'd': _number(lambda c: c.get_day_of_month()),
	'E': _weekday,
	'H': _number(lambda c: c.get_hour_of_day()),
	'm': _number(lambda c: c.get_minute_of_hour()),
	's': _number(lambda c: c.get_second_of_minute()),
	'S': _number(lambda c: c.get_millis_of_second()),
	'Z': _offset,
}

@functools.lru_cache(16)
def compile(pattern):
	"""
	# Split the &pattern into a tuple of literal strings and `(letter, width)` pairs.
	"""
	parts = []
	position = 0
	for match in tokens.finditer(pattern):
		start, stop = match.span()
		if start > position:
			parts.append(pattern[position:start])

		text = match.group()
		if text[0] == "'":
			parts.append(text[1:-1].replace("''", "'") if len(text) > 2 else "'")
		else:
			parts.append((text[0], len(text)))
		position = stop

	if position < len(pattern):
		parts.append(pattern[position:])
	return tuple(parts)

def formatter(pattern=None, _deref=aliases.get):
	"""
	# Given a pattern or a format identifier, return the function that formats
	# calendars accordingly.

	# Calendars are given to the function and must provide the `get_*` accessors,
	# `time`, and `with_zone`.
	"""
	if pattern is None:
		pattern = default
	pattern = models.get(_deref(pattern, pattern), pattern)

	def format_calendar(calendar, parts=compile(pattern), renderers=renderers):
		return ''.join([
			x if isinstance(x, str) else renderers[x[0]](calendar, x[1])
			for x in parts
		])
	return format_calendar
