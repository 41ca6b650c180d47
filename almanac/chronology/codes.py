"""
# Field numbers for code based access to calendar values.

# The numbers follow the conventional layout used by calendar libraries so that
# clients ported from them can keep their constants. Months and days of week
# are reported as the fields report them: one-based.

#!python
	from almanac.chronology import codes
	assert calendar.get(codes.DAY_OF_MONTH) == calendar.get_day_of_month()
"""
from . import core
from . import gregorian

ERA = 0
YEAR = 1
MONTH = 2
WEEK_OF_YEAR = 3
WEEK_OF_MONTH = 4
DATE = 5
DAY_OF_MONTH = 5
DAY_OF_YEAR = 6
DAY_OF_WEEK = 7
AM_PM = 8
HOUR = 9
HOUR_OF_DAY = 10
MINUTE = 11
SECOND = 12
MILLISECOND = 13
ZONE_OFFSET = 14
DST_OFFSET = 15

#: Symbolic names of the field numbers.
names = {
	'ERA': ERA,
	'YEAR': YEAR,
	'MONTH': MONTH,
	'WEEK_OF_YEAR': WEEK_OF_YEAR,
	'WEEK_OF_MONTH': WEEK_OF_MONTH,
	'DATE': DATE,
	'DAY_OF_MONTH': DAY_OF_MONTH,
	'DAY_OF_YEAR': DAY_OF_YEAR,
	'DAY_OF_WEEK': DAY_OF_WEEK,
	'AM_PM': AM_PM,
	'HOUR': HOUR,
	'HOUR_OF_DAY': HOUR_OF_DAY,
	'MINUTE': MINUTE,
	'SECOND': SECOND,
	'MILLISECOND': MILLISECOND,
	'ZONE_OFFSET': ZONE_OFFSET,
	'DST_OFFSET': DST_OFFSET,
}

def _day_of_year(calendar):
	start = gregorian.days_from_year(calendar.get_year()) - gregorian.epoch_days
	return (calendar.local() // core.millis_per_day) - start + 1

def _zone_offset(calendar):
	return calendar.with_zone().offset(calendar.time())

def _dst_offset(calendar):
	return calendar.with_zone().dst_shift(calendar.time())

selectors = {
	# Common Era when positive, and Before when not.
	ERA: (lambda c: 1 if c.get_year() > 0 else 0),
	YEAR: (lambda c: c.get_year()),
	MONTH: (lambda c: c.get_month()),
	WEEK_OF_YEAR: (lambda c: c.get_week_of_year()),
	WEEK_OF_MONTH: (lambda c: c.get_week_of_month()),
	DAY_OF_MONTH: (lambda c: c.get_day_of_month()),
	DAY_OF_YEAR: _day_of_year,
	DAY_OF_WEEK: (lambda c: c.get_day_of_week()),
	AM_PM: (lambda c: c.get_hour_of_day() // 12),
	HOUR: (lambda c: c.get_hour_of_day() % 12),
	HOUR_OF_DAY: (lambda c: c.get_hour_of_day()),
	MINUTE: (lambda c: c.get_minute_of_hour()),
	SECOND: (lambda c: c.get_second_of_minute()),
	MILLISECOND: (lambda c: c.get_millis_of_second()),
	ZONE_OFFSET: _zone_offset,
	DST_OFFSET: _dst_offset,
}

def select(calendar, code):
	"""
	# Get the value identified by the field number, &code, from &calendar.

	# [ Exceptions ]
	# /&core.InvalidArgumentError/
		# When &code is not a known field number.
	"""
	try:
		get = selectors[code]
	except (KeyError, TypeError):
		raise core.InvalidArgumentError("unknown field code: %r" %(code,))
	return get(calendar)
