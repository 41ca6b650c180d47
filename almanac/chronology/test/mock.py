"""
# Test support: fixed clocks and zones with daylight saving transitions.
"""
from .. import core
from .. import gregorian
from .. import week
from .. import zone

class Clock(object):
	'Mock clock'

	def __init__(self, value=0):
		self.value = value

	def set(self, value):
		self.value = value

	def __call__(self):
		return self.value

def instant(year, month, day, hour=0, minute=0, second=0, millis=0):
	"""
	# The UTC instant of the given Gregorian date and time.
	"""
	days = gregorian.days_from_date((year, month, day)) - gregorian.epoch_days
	return (
		days * core.millis_per_day +
		hour * core.millis_per_hour +
		minute * core.millis_per_minute +
		second * core.millis_per_second +
		millis
	)

def last_sunday(year, month):
	last = gregorian.days_from_date((year, month, gregorian.days_in_month(year, month)))
	last -= gregorian.epoch_days
	return last - week.position(week.day_of_week(last), week.Weekday.SUNDAY)

def first_sunday(year, month):
	first = gregorian.days_from_date((year, month, 1)) - gregorian.epoch_days
	return first + week.position(week.Weekday.SUNDAY, week.day_of_week(first))

cet = zone.Offset((core.millis_per_hour, 'CET', 'std'))
cest = zone.Offset((2 * core.millis_per_hour, 'CEST', 'dst'))

def central_european(years=range(2018, 2025)):
	"""
	# Zone switching to summer time at 01:00 UTC on the last Sunday of March
	# and back on the last Sunday of October.
	"""
	transitions = []
	for y in years:
		transitions.append((last_sunday(y, 3) * core.millis_per_day + core.millis_per_hour, cest))
		transitions.append((last_sunday(y, 10) * core.millis_per_day + core.millis_per_hour, cet))
	return zone.Zone.from_transitions(cet, transitions, 'Europe/Central')

est = zone.Offset((-5 * core.millis_per_hour, 'EST', 'std'))
edt = zone.Offset((-4 * core.millis_per_hour, 'EDT', 'dst'))

def eastern(years=range(2018, 2025)):
	"""
	# Zone switching to daylight time at 07:00 UTC on the second Sunday of March
	# and back at 06:00 UTC on the first Sunday of November.
	"""
	transitions = []
	for y in years:
		spring = first_sunday(y, 3) + week.days_in_week
		transitions.append((spring * core.millis_per_day + 7 * core.millis_per_hour, edt))
		transitions.append((first_sunday(y, 11) * core.millis_per_day + 6 * core.millis_per_hour, est))
	return zone.Zone.from_transitions(est, transitions, 'America/Eastern', week.Weekday.SUNDAY)

lhst = zone.Offset((10 * core.millis_per_hour + 30 * core.millis_per_minute, 'LHST', 'std'))
lhdt = zone.Offset((11 * core.millis_per_hour, 'LHDT', 'dst'))

def lord_howe():
	"""
	# Zone with a half hour daylight saving shift at 02:00 local time on 2021-10-03.
	"""
	start = instant(2021, 10, 3, 2) - lhst.magnitude
	return zone.Zone.from_transitions(lhst, [(start, lhdt)], 'Australia/Lord_Howe')

ist = zone.Offset((core.millis_per_hour, 'IST', 'std'))
gmt = zone.Offset((0, 'GMT', 'dst'))

def irish():
	"""
	# Zone whose summer offset is the standard one; winter time is a negative
	# daylight saving period that ends at 01:00 UTC on 2021-03-28.
	"""
	return zone.Zone.from_transitions(ist, [
		(instant(2020, 10, 25, 1), gmt),
		(instant(2021, 3, 28, 1), ist),
	], 'Europe/Dublin')
