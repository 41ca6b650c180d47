"""
# Proleptic Gregorian calendar functions and data.

# Days are counted from 0000-01-01 unless the function states otherwise;
# &epoch_days converts between that datum and the 1970 epoch used by instants.
"""
import bisect
import enum
import itertools

from . import core

#: number of centuries in a gregorian cycle.
centuries_in_cycle = 4

#: number of years in a century.
years_in_century = 100

#: number of years in a gregorian cycle.
years_in_cycle = years_in_century * centuries_in_cycle

#: english names of the months of the year.
month_names = (
	"january",
	"february",
	"march",
	"april",
	"may",
	"june",
	"july",
	"august",
	"september",
	"october",
	"november",
	"december",
)

#: number of months in a year.
months_in_year = len(month_names)

#: abbreviations for the english names of the months of the year.
month_abbreviations = (
	"jan", "feb", "mar",
	"apr", "may", "jun",
	"jul", "aug", "sep",
	"oct", "nov", "dec",
)

class Month(enum.IntEnum):
	"""
	# The months of the year; January is one.
	"""
	JANUARY = 1
	FEBRUARY = 2
	MARCH = 3
	APRIL = 4
	MAY = 5
	JUNE = 6
	JULY = 7
	AUGUST = 8
	SEPTEMBER = 9
	OCTOBER = 10
	NOVEMBER = 11
	DECEMBER = 12

#: Definition of a year in terms of gregorian month-to-days.
calendar_year = (
	31, 28, 31, 30,
	31, 30, 31, 31,
	30, 31, 30, 31
)

#: Definition of a leap year in terms of gregorian month-to-days.
calendar_leap = (calendar_year[0], calendar_year[1] + 1) + calendar_year[2:] # Feb29

#: Days preceding the start of each month; the final entry is the length of the year.
days_by_month = tuple(itertools.accumulate(itertools.chain((0,), calendar_year)))
days_by_leap_month = tuple(itertools.accumulate(itertools.chain((0,), calendar_leap)))

#: Milliseconds preceding the start of each month.
millis_by_month = tuple(x * core.millis_per_day for x in days_by_month)
millis_by_leap_month = tuple(x * core.millis_per_day for x in days_by_leap_month)

#: Total number of days in a Gregorian cycle.
days_in_cycle = (years_in_cycle * 365) + 97

def year_is_leap(y):
	"""
	# Given a gregorian calendar year, determine whether it is a leap year.
	"""
	if y % 4 == 0 and (y % 400 == 0 or not y % 100 == 0):
		return True
	return False

def days_in_year(y):
	return days_by_leap_month[-1] if year_is_leap(y) else days_by_month[-1]

def days_in_month(y, m):
	"""
	# Number of days in the month, &m, of the year, &y. Months are one-based.
	"""
	return (calendar_leap if year_is_leap(y) else calendar_year)[m-1]

def month_table(leap):
	"""
	# Select the cumulative millisecond table for a leap or common year.
	"""
	return millis_by_leap_month if leap else millis_by_month

def days_from_year(y):
	"""
	# Number of days from 0000-01-01 to the first day of the year, &y.

	# Floor division keeps the leap count correct for negative years.
	"""
	return (y * 365) + ((y + 3) // 4) - ((y + 99) // 100) + ((y + 399) // 400)

#: Days from 0000-01-01 to 1970-01-01.
epoch_days = days_from_year(1970)

def year_from_days(days, divmod=divmod):
	"""
	# The year containing the day, &days, counted from 0000-01-01.
	"""
	cycles, day = divmod(days, days_in_cycle)
	y = (day * years_in_cycle) // days_in_cycle

	# The estimate is within one year of the actual.
	while days_from_year(y + 1) <= day:
		y += 1
	while days_from_year(y) > day:
		y -= 1

	return (cycles * years_in_cycle) + y

def month_from_offset(offset, leap, bisect=bisect.bisect_right):
	"""
	# Locate the one-based month containing the millisecond &offset from the
	# start of a year.

	# [ Parameters ]
	# /offset/
		# Milliseconds since January 1; `0 <= offset < year length`.
	# /leap/
		# Whether the year is a leap year.
	"""
	return bisect(month_table(leap), offset, 1, months_in_year)

def date_from_days(days):
	"""
	# Convert the given Earth-days into a Gregorian date in the common form:
	# (year, month, day).
	"""
	y = year_from_days(days)
	day_of_year = days - days_from_year(y)
	table = days_by_leap_month if year_is_leap(y) else days_by_month
	m = bisect.bisect_right(table, day_of_year, 1, months_in_year)
	return (y, m, day_of_year - table[m-1] + 1)

def days_from_date(date):
	"""
	# Convert a Gregorian date in the common form, (year, month, day), to the number
	# of days leading up to the date.
	"""
	year, month, day = date
	table = days_by_leap_month if year_is_leap(year) else days_by_month
	return days_from_year(year) + table[month-1] + (day - 1)
