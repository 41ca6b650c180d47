"""
# Mutable calendar views of an instant.

# A &Calendar holds one UTC instant, a zone, and the set of &.fields that decompose
# the zone-local form of the instant. Every mutation is performed on the instant;
# the fields are re-derived before and after so that they never drift from it.

#!python
	from almanac.chronology import calendar, zone

	c = calendar.Calendar(0, zone.utc)
	c.with_date(2023, 1, 31).with_month(2)
	assert c.get_day_of_month() == 28

# Relative updates, `plus_*`, are performed on the local form of the instant when
# the unit exceeds the zone's daylight saving shift so that days, months, and years
# keep the wall clock time. Smaller units are elapsed time.

# Absolute updates, `with_*`, move the instant by the difference between the field's
# current and new contributions, compensate for offset changes, and refuse to
# produce local times that the zone skips.
"""
import datetime
import logging

from . import core
from . import codes
from . import fields as libfields
from . import format as libformat
from . import gregorian
from . import system
from . import week
from . import zone as libzone

logger = logging.getLogger(__name__)

class Calendar(object):
	"""
	# An instant viewed through a time zone as Gregorian calendar fields.

	# [ Properties ]
	# /fields/
		# The &libfields.Fields owned by the calendar.
	"""

	def __init__(self, time=None, zone=None, *, context=system.standard):
		"""
		# [ Parameters ]
		# /time/
			# The instant in milliseconds since the epoch.
			# Defaults to the current time read from the &context clock.
		# /zone/
			# The &libzone.TimeZone used to derive local time.
			# Defaults to the &context zone.
		# /context/
			# The &system.Context supplying defaults.
		"""
		self._zone = self._validate_zone(context.zone if zone is None else zone)
		self._instant = core.integer(context.clock() if time is None else time)

		if context.first_day is None:
			self._first_day = week.validate(self._zone.first_day(self._instant))
		else:
			self._first_day = week.validate(context.first_day)

		self.fields = libfields.Fields.allocate(self)
		self._derive()

	def __repr__(self):
		return '<%s: %d %r>' %(self.__class__.__name__, self._instant, self._zone)

	def __str__(self):
		return self.to_string()

	@staticmethod
	def _validate_zone(zone):
		if not isinstance(zone, libzone.TimeZone):
			raise core.InvalidArgumentError(
				"zone must provide offset, dst_shift, and first_day; got %r" %(zone,)
			)
		return zone

	def local(self):
		"""
		# The instant adjusted by the zone's offset.
		"""
		return self._instant + self._zone.offset(self._instant)

	def _derive(self):
		local = self.local()
		self.fields.derive(local)
		return local

	def _utc(self, local):
		# Offset in effect at the instant the local time most likely refers to.
		zone = self._zone
		return local - zone.offset(local - zone.offset(local))

	def _plus(self, unit, amount, delta=None):
		"""
		# Add &amount units to the instant.

		# [ Parameters ]
		# /unit/
			# Nominal milliseconds per unit; &None for variable length units.
		# /amount/
			# Number of units to add.
		# /delta/
			# Callable computing the millisecond delta from the local instant and
			# the &amount when &unit is &None.
		"""
		amount = core.integer(amount)
		if not amount:
			return self

		self._derive()
		zone = self._zone
		instant = self._instant
		localized = unit is None or unit > zone.dst_shift(instant)

		try:
			if localized:
				instant += zone.offset(instant)

			if delta is None:
				instant += unit * amount
			else:
				instant += delta(instant, amount)

			if localized:
				instant = self._utc(instant)

			self._instant = instant
		finally:
			self._derive()

		return self

	def _with(self, field, value=None, adjust=None):
		"""
		# Set the &field to &value by moving the instant, or return the
		# field's value when &value is &None.

		# [ Parameters ]
		# /adjust/
			# Callable given the candidate local instant that returns a
			# correction for dependent fields.

		# [ Exceptions ]
		# /&core.InvalidLocalTimeError/
			# The resulting local time does not exist in the zone.
		"""
		local = self._derive()
		if value is None:
			return field.value()

		zone = self._zone
		offset = zone.offset(self._instant)

		try:
			prior = field.millis()
			diff = field.set(value).millis() - prior
			if adjust is not None:
				diff += adjust(local + diff)

			target = local + diff
			instant = self._instant + diff + (offset - zone.offset(self._instant + diff))

			if instant + zone.offset(instant) != target:
				# Estimate again from the offset found at the first.
				instant = target - zone.offset(instant)
				if instant + zone.offset(instant) != target:
					logger.debug("rejected local time %d; not present in %r", target, zone)
					raise core.InvalidLocalTimeError(target, zone)

			self._instant = instant
		finally:
			self._derive()

		return self

	def _adjust_month(self, candidate):
		"""
		# Correction applied after a year change: keep the month and clamp the day
		# of month to the length of the month in the new year.
		"""
		fields = self.fields
		year = fields.year
		month = fields.month.value()
		day = min(fields.day_of_month.value(), gregorian.days_in_month(year.value(), month))

		target = year.millis() + gregorian.month_table(year.leap())[month - 1]
		target += (day - 1) * core.millis_per_day
		target += candidate % core.millis_per_day

		return target - candidate

	def _adjust_day_of_month(self, candidate):
		"""
		# Correction applied after a month change: when the day of month
		# overflowed into the following month, return to the last day of the
		# target month.
		"""
		day = self.fields.day_of_month
		prior = day.millis()
		after = day.derive(candidate).millis()

		if prior != after:
			return -(after + core.millis_per_day)
		return 0

	def _years_delta(self, local, years):
		year = self.fields.year
		prior = year.millis()
		delta = year.set(year.value() + years).millis() - prior

		return delta + self._adjust_month(local + delta)

	def _months_delta(self, local, months):
		fields = self.fields
		year = fields.year
		month = fields.month
		prior = year.millis() + month.millis()

		years, m = divmod(month.value() - 1 + months, gregorian.months_in_year)
		if years:
			year.set(year.value() + years)
		month.set(m + 1)
		delta = year.millis() + month.millis() - prior

		return delta + self._adjust_day_of_month(local + delta)

	def _composite(self, *steps):
		instant = self._instant
		try:
			for method, value in steps:
				if value is not None:
					method(value)
		except core.Error:
			self._instant = instant
			self._derive()
			raise

		return self

	# Accessors

	def get_year(self):
		return self._with(self.fields.year)

	def get_month(self):
		return self._with(self.fields.month)

	def get_day_of_month(self):
		return self._with(self.fields.day_of_month)

	def get_day_of_week(self):
		return self._with(self.fields.day_of_week)

	def get_week_of_month(self):
		return self._with(self.fields.week_of_month)

	def get_week_of_year(self):
		return self._with(self.fields.week_of_year)

	def get_hour_of_day(self):
		return self._with(self.fields.hour)

	def get_minute_of_hour(self):
		return self._with(self.fields.minute)

	def get_second_of_minute(self):
		return self._with(self.fields.second)

	def get_millis_of_second(self):
		return self._with(self.fields.millisecond)

	def get(self, code):
		"""
		# Get a value by its &codes field number.
		"""
		return codes.select(self, code)

	# Years and months

	def with_year(self, year=None):
		return self._with(self.fields.year, year, self._adjust_month)

	def plus_years(self, years):
		return self._plus(None, years, self._years_delta)

	def minus_years(self, years):
		return self.plus_years(-core.integer(years))

	def with_month(self, month=None):
		return self._with(self.fields.month, month, self._adjust_day_of_month)

	def plus_months(self, months):
		return self._plus(None, months, self._months_delta)

	def minus_months(self, months):
		return self.plus_months(-core.integer(months))

	# Weeks

	def with_first_week_day(self, day=None):
		"""
		# Get or set the first day of the week used by the week fields.
		"""
		if day is None:
			return self._first_day

		self._first_day = week.validate(day)
		logger.debug("first day of week set to %s", self._first_day.name)
		self._derive()
		return self

	def with_week_of_year(self, week_of_year=None):
		return self._with(self.fields.week_of_year, week_of_year)

	def with_week_of_month(self, week_of_month=None):
		return self._with(self.fields.week_of_month, week_of_month)

	def plus_weeks(self, weeks):
		return self._plus(core.millis_per_week, weeks)

	def minus_weeks(self, weeks):
		return self.plus_weeks(-core.integer(weeks))

	# Days

	def with_day_of_month(self, day=None):
		return self._with(self.fields.day_of_month, day)

	def with_day_of_week(self, day=None):
		return self._with(self.fields.day_of_week, day)

	def plus_days(self, days):
		return self._plus(core.millis_per_day, days)

	def minus_days(self, days):
		return self.plus_days(-core.integer(days))

	# Time of day

	def with_hour_of_day(self, hour=None):
		return self._with(self.fields.hour, hour)

	def plus_hours(self, hours):
		return self._plus(core.millis_per_hour, hours)

	def minus_hours(self, hours):
		return self.plus_hours(-core.integer(hours))

	def with_minute_of_hour(self, minute=None):
		return self._with(self.fields.minute, minute)

	def plus_minutes(self, minutes):
		return self._plus(core.millis_per_minute, minutes)

	def minus_minutes(self, minutes):
		return self.plus_minutes(-core.integer(minutes))

	def with_second_of_minute(self, second=None):
		return self._with(self.fields.second, second)

	def plus_seconds(self, seconds):
		return self._plus(core.millis_per_second, seconds)

	def minus_seconds(self, seconds):
		return self.plus_seconds(-core.integer(seconds))

	def with_millis_of_second(self, millis=None):
		return self._with(self.fields.millisecond, millis)

	def plus_millis(self, millis):
		return self._plus(1, millis)

	def minus_millis(self, millis):
		return self.plus_millis(-core.integer(millis))

	# Composites

	def with_date(self, year=None, month=None, day=None):
		"""
		# Set the given date fields in order: year, month, day of month.

		# When any of the updates fail, the calendar is restored to its prior instant.
		"""
		return self._composite(
			(self.with_year, year),
			(self.with_month, month),
			(self.with_day_of_month, day),
		)

	def with_time(self, hour=None, minute=None, second=None, millis=None):
		"""
		# Set the given time of day fields in order: hour, minute, second, millisecond.

		# When any of the updates fail, the calendar is restored to its prior instant.
		"""
		return self._composite(
			(self.with_hour_of_day, hour),
			(self.with_minute_of_hour, minute),
			(self.with_second_of_minute, second),
			(self.with_millis_of_second, millis),
		)

	def without_time(self):
		"""
		# Truncate the instant to the start of the local day.
		"""
		local = self.local()
		self._instant = self._utc(local - (local % core.millis_per_day))
		self._derive()
		return self

	def reset(self):
		"""
		# Move the instant to the zone's local epoch, 1970-01-01T00:00:00.000.
		"""
		self._instant = -self._zone.offset(0)
		logger.debug("calendar reset to %d", self._instant)
		self._derive()
		return self

	# Instant and zone

	def with_zone(self, zone=None):
		"""
		# Get or replace the &libzone.TimeZone.

		# [ Exceptions ]
		# /&core.InvalidArgumentError/
			# When &zone does not provide the &libzone.TimeZone methods.
		"""
		if zone is None:
			return self._zone

		self._zone = self._validate_zone(zone)
		logger.debug("zone replaced by %r", zone)
		self._derive()
		return self

	def time(self, value=None):
		"""
		# Get or set the UTC instant in milliseconds.
		"""
		if value is None:
			return self._instant

		self._instant = core.integer(value)
		self._derive()
		return self

	def to_date(self, epoch=datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)):
		"""
		# The instant as an aware &datetime.datetime in UTC.

		# [ Exceptions ]
		# /&core.RangeError/
			# When the UTC year of the instant is outside of the years
			# representable by &datetime.datetime.
		"""
		try:
			return epoch + datetime.timedelta(milliseconds=self._instant)
		except OverflowError as err:
			year = gregorian.year_from_days((self._instant // core.millis_per_day) + gregorian.epoch_days)
			raise core.RangeError('Date year', year, datetime.MINYEAR, datetime.MAXYEAR) from err

	def to_string(self, pattern=None):
		"""
		# Format the calendar using &libformat.formatter.
		"""
		return libformat.formatter(pattern)(self)
