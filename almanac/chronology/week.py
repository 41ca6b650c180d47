"""
# Week based measures of time: days of seven.

# Days of week are numbered from &Weekday.SUNDAY, one, through &Weekday.SATURDAY, seven.
# Week arithmetic is relative to a first day of week so that the same functions
# serve Sunday and Monday based weeks.
"""
import enum

from . import core

#: English names of the days of the week.
weekday_names = (
	'sunday',
	'monday',
	'tuesday',
	'wednesday',
	'thursday',
	'friday',
	'saturday',
)

#: Total number of a days in a week.
days_in_week = len(weekday_names)

#: Abbreviations for the english names of the days of the week.
weekday_abbreviations = (
	'sun', 'mon', 'tue', 'wed', 'thu', 'fri', 'sat',
)

#: Map of weekday names and abbreviations to a one-based &Weekday.
weekday_name_to_number = {
	weekday_names[i]: i + 1
	for i in range(len(weekday_names))
}
weekday_name_to_number.update([
	(k[:3], v) for (k,v) in weekday_name_to_number.items()
])

class Weekday(enum.IntEnum):
	SUNDAY = 1
	MONDAY = 2
	TUESDAY = 3
	WEDNESDAY = 4
	THURSDAY = 5
	FRIDAY = 6
	SATURDAY = 7

#: The day of week of 1970-01-01.
epoch_weekday = Weekday.THURSDAY

def validate(day):
	"""
	# Validate and return the &Weekday identified by &day.

	# [ Exceptions ]
	# /&core.NotAnIntegerError/
		# When &day is not an integer.
	# /&core.RangeError/
		# When &day is outside of `[1, 7]`.
	"""
	day = core.integer(day)
	if day < Weekday.SUNDAY or day > Weekday.SATURDAY:
		raise core.RangeError('Day of week', day, Weekday.SUNDAY, Weekday.SATURDAY)
	return Weekday(day)

def day_of_week(days):
	"""
	# Derive the &Weekday of the given number of days since the 1970 epoch.
	"""
	return Weekday(((days + epoch_weekday - 1) % days_in_week) + 1)

def position(day, first):
	"""
	# Zero-based position of &day within a week starting on &first.
	"""
	return (day - first) % days_in_week

def week_from_days(offset, days):
	"""
	# Zero-based week containing the zero-based day, &days, of a period whose
	# first day sits at &offset within its week.
	"""
	return (days + offset) // days_in_week
