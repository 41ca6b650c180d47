"""
# Calendar fields.

# A field converts in both directions between a zone-local instant and a
# decomposed value: &Field.derive extracts and caches the value from a local
# instant, and &Field.millis gives the value's millisecond contribution within
# its enclosing field. The cached value is a view of the owning calendar's
# instant and is refreshed by the calendar whenever the instant may have moved.

# Fields address their siblings through `calendar.fields`; they are allocated by
# &Fields.allocate on behalf of exactly one &.calendar.Calendar.
"""
import typing

from . import core
from . import gregorian
from . import week

class Field(object):
	"""
	# Base class for calendar fields.

	# [ Properties ]
	# /calendar/
		# The owning calendar.
	# /name/
		# Display name used by errors.
	# /minimum/
		# Smallest value accepted by &set.
	# /maximum/
		# Largest value accepted by &set.
	# /unit/
		# Nominal milliseconds in one unit of the field;
		# &None when the length varies.
	"""
	__slots__ = ('calendar', '_value')

	name = None
	minimum = 0
	maximum = 0
	unit = None

	def __init__(self, calendar):
		self.calendar = calendar
		self._value = self.minimum

	def __repr__(self):
		return '<%s: %d>' %(self.__class__.__name__, self._value)

	@classmethod
	def validate(Class, value):
		"""
		# Validate that &value is an integer within the field's bounds and return it.
		"""
		value = core.integer(value)
		if value < Class.minimum or value > Class.maximum:
			raise core.RangeError(Class.name, value, Class.minimum, Class.maximum)
		return value

	def value(self):
		"""
		# The cached decomposed value.
		"""
		return self._value

	def set(self, value):
		"""
		# Validate and assign the decomposed value.
		"""
		self._value = self.validate(value)
		return self

	def millis(self):
		"""
		# Millisecond contribution of the value within the enclosing field.
		"""
		raise NotImplementedError(self.__class__.__name__ + '.millis')

	def derive(self, local, enclosing=None):
		"""
		# Derive and cache the value from the zone-local instant, &local.

		# [ Parameters ]
		# /local/
			# The zone adjusted instant.
		# /enclosing/
			# The value of the enclosing field when it is being changed by the same
			# operation. Derived from &local when &None.
		"""
		raise NotImplementedError(self.__class__.__name__ + '.derive')

class Uniform(Field):
	"""
	# A field whose units are all the same length and that wraps at &modulus.
	"""
	__slots__ = ()
	modulus = 1

	def millis(self):
		return self._value * self.unit

	def derive(self, local, enclosing=None):
		self._value = (local // self.unit) % self.modulus
		return self

class Year(Field):
	__slots__ = ()
	name = 'Year'
	# Years reachable by the local form of any accepted instant.
	minimum = gregorian.year_from_days(
		((-core.integer_limit - core.millis_per_day) // core.millis_per_day) + gregorian.epoch_days
	)
	maximum = gregorian.year_from_days(
		((core.integer_limit + core.millis_per_day) // core.millis_per_day) + gregorian.epoch_days
	)

	def leap(self):
		return gregorian.year_is_leap(self._value)

	def millis(self):
		"""
		# Milliseconds from the epoch to January 1 of the year.
		"""
		return (gregorian.days_from_year(self._value) - gregorian.epoch_days) * core.millis_per_day

	def duration(self):
		return gregorian.days_in_year(self._value) * core.millis_per_day

	def derive(self, local, enclosing=None):
		days = (local // core.millis_per_day) + gregorian.epoch_days
		self._value = gregorian.year_from_days(days)
		return self

class Month(Field):
	__slots__ = ()
	name = 'Month'
	minimum = gregorian.Month.JANUARY
	maximum = gregorian.Month.DECEMBER

	def _table(self):
		return gregorian.month_table(self.calendar.fields.year.leap())

	def millis(self):
		"""
		# Milliseconds from the start of the year to the start of the month.
		"""
		return self._table()[self._value - 1]

	def duration(self):
		table = self._table()
		return table[self._value] - table[self._value - 1]

	def derive(self, local, enclosing=None):
		year = self.calendar.fields.year
		if enclosing is None:
			year.derive(local)
		else:
			year.set(enclosing)

		self._value = gregorian.month_from_offset(local - year.millis(), year.leap())
		return self

class DayOfMonth(Field):
	__slots__ = ()
	name = 'Day of month'
	minimum = 1
	maximum = 31
	unit = core.millis_per_day

	def millis(self):
		return (self._value - 1) * core.millis_per_day

	def derive(self, local, enclosing=None):
		fields = self.calendar.fields
		if enclosing is None:
			fields.month.derive(local)
		else:
			fields.year.derive(local)
			fields.month.set(enclosing)

		start = fields.year.millis() + fields.month.millis()
		self._value = ((local - start) // core.millis_per_day) + 1
		return self

class DayOfWeek(Field):
	__slots__ = ()
	name = 'Day of week'
	minimum = week.Weekday.SUNDAY
	maximum = week.Weekday.SATURDAY
	unit = core.millis_per_day

	@classmethod
	def validate(Class, value):
		return week.validate(value)

	def millis(self):
		"""
		# Milliseconds from the first day of the week to the day.
		"""
		first = self.calendar.with_first_week_day()
		return week.position(self._value, first) * core.millis_per_day

	def derive(self, local, enclosing=None):
		self._value = week.day_of_week(local // core.millis_per_day)
		return self

class WeekOfMonth(Field):
	__slots__ = ()
	name = 'Week of month'
	minimum = 1
	maximum = 6
	unit = core.millis_per_week

	def millis(self):
		return (self._value - 1) * core.millis_per_week

	def derive(self, local, enclosing=None):
		day = self.calendar.fields.day_of_month.derive(local, enclosing).value() - 1
		first = week.day_of_week((local // core.millis_per_day) - day)
		offset = week.position(first, self.calendar.with_first_week_day())
		self._value = week.week_from_days(offset, day) + 1
		return self

class WeekOfYear(Field):
	__slots__ = ()
	name = 'Week of year'
	minimum = 1
	maximum = 54
	unit = core.millis_per_week

	def millis(self):
		return (self._value - 1) * core.millis_per_week

	def derive(self, local, enclosing=None):
		year = self.calendar.fields.year
		if enclosing is None:
			year.derive(local)
		else:
			year.set(enclosing)

		start = gregorian.days_from_year(year.value()) - gregorian.epoch_days
		offset = week.position(week.day_of_week(start), self.calendar.with_first_week_day())
		day = (local // core.millis_per_day) - start
		self._value = week.week_from_days(offset, day) + 1
		return self

class Hour(Uniform):
	__slots__ = ()
	name = 'Hour of day'
	maximum = 23
	unit = core.millis_per_hour
	modulus = 24

class Minute(Uniform):
	__slots__ = ()
	name = 'Minute of hour'
	maximum = 59
	unit = core.millis_per_minute
	modulus = 60

class Second(Uniform):
	__slots__ = ()
	name = 'Second of minute'
	maximum = 59
	unit = core.millis_per_second
	modulus = 60

class Millisecond(Uniform):
	__slots__ = ()
	name = 'Millisecond of second'
	maximum = 999
	unit = 1
	modulus = core.millis_per_second

class Fields(typing.NamedTuple):
	"""
	# The set of fields owned by a calendar.
	"""
	year: Year
	month: Month
	day_of_month: DayOfMonth
	day_of_week: DayOfWeek
	week_of_month: WeekOfMonth
	week_of_year: WeekOfYear
	hour: Hour
	minute: Minute
	second: Second
	millisecond: Millisecond

	@classmethod
	def allocate(Class, calendar):
		"""
		# Create the fields for &calendar. Only the calendar itself should call this.
		"""
		return Class(
			Year(calendar),
			Month(calendar),
			DayOfMonth(calendar),
			DayOfWeek(calendar),
			WeekOfMonth(calendar),
			WeekOfYear(calendar),
			Hour(calendar),
			Minute(calendar),
			Second(calendar),
			Millisecond(calendar),
		)

	def derive(self, local):
		"""
		# Refresh every field from the zone-local instant.
		"""
		for field in self:
			field.derive(local)
