"""
# System clock access and the default &Context used by calendars.

# Calendars take their defaults from an explicit &Context rather than process
# global state. &standard is used when none is given; applications wanting a
# different zone or a fixed clock derive one with &Context.replace.

#!python
	from almanac.chronology import system, calendar
	ctx = system.standard.replace(clock=(lambda: 0))
	assert calendar.Calendar(context=ctx).time() == 0
"""
import dataclasses
import logging
import time
import typing

from . import zone as libzone

logger = logging.getLogger(__name__)

def now(time_ns=time.time_ns, divmod=divmod):
	"""
	# The current UTC time in milliseconds since the epoch.
	"""
	return divmod(time_ns(), 1000000)[0]

@dataclasses.dataclass(frozen=True)
class Context(object):
	"""
	# The defaults applied by &.calendar.Calendar when arguments are omitted.

	# [ Properties ]
	# /zone/
		# The &libzone.TimeZone used when no zone is given.
	# /clock/
		# Callable returning the current instant in milliseconds.
	# /first_day/
		# The first day of the week; &None to ask the zone.
	"""
	zone: libzone.TimeZone = libzone.utc
	clock: typing.Callable[[], int] = now
	first_day: typing.Optional[int] = None

	def replace(self, **fields):
		"""
		# Create a new &Context with the given &fields replaced.
		"""
		logger.debug("deriving context with %s", ', '.join(sorted(fields)))
		return dataclasses.replace(self, **fields)

standard = Context()
