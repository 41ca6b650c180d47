"""
# Time zone capability and a transition table implementation.

# &.calendar.Calendar only depends on &TimeZone; &Zone is the implementation
# shipped with the project and is constructed from explicit transition tables.

#!python
	from almanac.chronology import zone
	cet = zone.Offset((3600000, 'CET', 'std'))
	cest = zone.Offset((7200000, 'CEST', 'dst'))
	z = zone.Zone.from_transitions(cet, [(1616893200000, cest)], 'Europe/Example')
"""
import bisect
import typing

from . import week

@typing.runtime_checkable
class TimeZone(typing.Protocol):
	"""
	# The capabilities required from a zone by &.calendar.Calendar.

	# Implementations must be pure functions of the given instant.
	"""

	def offset(self, instant:int) -> int:
		"""
		# Milliseconds to add to the UTC &instant in order to get the local time.
		"""

	def dst_shift(self, instant:int) -> int:
		"""
		# Magnitude, in milliseconds, of the daylight saving discontinuity
		# relevant to the &instant. Zero when the zone has none.
		"""

	def first_day(self, instant:int) -> week.Weekday:
		"""
		# The zone's customary first day of the week.
		"""

class Offset(tuple):
	"""
	# Offsets are constructed by a tuple of the form: `(offset, abbreviation, type)`.
	# Primarily, the type signifies whether or not the offset is daylight
	# savings or not.

	# The offset is expressed in milliseconds.
	"""
	__slots__ = ()

	@property
	def magnitude(self):
		"""
		# The offset in milliseconds from UTC.
		"""
		return self[0]

	@property
	def abbreviation(self):
		"""
		# The Offset's timezone abbreviation; such as UTC, GMT, and EST.
		"""
		return self[1]

	@property
	def type(self):
		return self[2]

	@property
	def is_dst(self):
		return self.type == 'dst'

	def __str__(self):
		return '%s%s%d' %(
			self.abbreviation,
			"+" if self.magnitude >= 0 else "-",
			abs(self.magnitude)
		)

	def __repr__(self):
		return '<%s(%s: %d)>' %(self.__class__.__name__, self.abbreviation, self.magnitude)

	def __int__(self):
		return self.magnitude

class Zone(object):
	"""
	# An ordered sequence of transition times whose ranges correspond to a
	# particular offset.

	# [ Properties ]
	# /transitions/
		# Sorted UTC instants at which the corresponding &offsets take effect.
	# /offsets/
		# The &Offset instances selected by &transitions.
	# /default/
		# The &Offset in effect before the first transition.
	# /name/
		# Identifier of the zone.
	# /week_start/
		# The &week.Weekday reported by &first_day.
	"""

	def __init__(self, transitions, offsets, default, name, week_start=week.Weekday.MONDAY):
		self.transitions = transitions
		self.offsets = offsets
		self.default = default
		self.name = name
		self.week_start = week_start

	def __repr__(self):
		return '<%s: %s[%d]>' %(
			self.__class__.__name__,
			self.name,
			len(self.transitions),
		)

	def find(self, instant, bisect=bisect.bisect):
		"""
		# Get the &Offset in effect at the UTC &instant.

		# If the &instant precedes all transitions, the &default is returned.
		"""
		idx = bisect(self.transitions, instant) - 1
		if idx < 0:
			return self.default
		return self.offsets[idx]

	def offset(self, instant):
		return self.find(instant).magnitude

	def localize(self, instant):
		"""
		# Given a UTC instant, return the localized instant and the &Offset
		# that was applied.
		"""
		offset = self.find(instant)
		return (instant + offset.magnitude, offset)

	def dst_shift(self, instant, bisect=bisect.bisect):
		"""
		# The size of the discontinuity that opened the period containing &instant,
		# or, before the first transition, the one that closes it.
		"""
		idx = bisect(self.transitions, instant) - 1
		for i in (idx, idx + 1):
			if 0 <= i < len(self.transitions):
				prior = self.offsets[i-1] if i > 0 else self.default
				return abs(self.offsets[i].magnitude - prior.magnitude)
		return 0

	def first_day(self, instant):
		return self.week_start

	@classmethod
	def fixed(Class, magnitude, abbreviation, week_start=week.Weekday.MONDAY):
		"""
		# Construct a &Zone without transitions.
		"""
		return Class((), (), Offset((magnitude, abbreviation, 'std')), abbreviation, week_start)

	@classmethod
	def from_transitions(Class, default, transitions, name, week_start=week.Weekday.MONDAY):
		"""
		# Construct a &Zone from an iterable of `(instant, offset)` pairs.
		"""
		pairs = sorted(transitions, key=(lambda x: x[0]))
		return Class(
			tuple(x[0] for x in pairs),
			tuple(x[1] for x in pairs),
			default, name, week_start
		)

utc = Zone.fixed(0, 'UTC')
