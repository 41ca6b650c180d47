"""
# Instant units, the error taxonomy, and integer validation shared by the project.

# Instants are &int counts of milliseconds since 1970-01-01T00:00:00.000 UTC.
# Negative instants precede the epoch.

# [ Elements ]

# /millis_per_second/
	# Milliseconds in a second.
# /millis_per_minute/
	# Milliseconds in a minute.
# /millis_per_hour/
	# Milliseconds in an hour.
# /millis_per_day/
	# Milliseconds in an Earth-day.
# /millis_per_week/
	# Milliseconds in a seven day week.
# /integer_limit/
	# The largest magnitude accepted by &integer.
"""
import numbers

millis_per_second = 1000
millis_per_minute = millis_per_second * 60
millis_per_hour = millis_per_minute * 60
millis_per_day = millis_per_hour * 24
millis_per_week = millis_per_day * 7

integer_limit = (2 ** 53) - 1

class Error(Exception):
	"""
	# Base class for chronology errors.
	"""

class RangeError(Error, ValueError):
	"""
	# A field value was outside of the field's static bounds.
	"""

	def __init__(self, field, value, minimum, maximum):
		self.field = field
		self.value = value
		self.minimum = minimum
		self.maximum = maximum

	def __str__(self):
		return "%s is expected to be in range [%d..%d] but was: %d" %(
			self.field, self.minimum, self.maximum, self.value
		)

class NotAnIntegerError(Error, TypeError):
	"""
	# The given object could not be represented as an integer.
	"""

	def __init__(self, subject):
		self.subject = subject

	def __str__(self):
		return "expected an integer, got: %r" %(self.subject,)

class InvalidLocalTimeError(Error, ValueError):
	"""
	# The local time produced by an absolute field update does not exist
	# in the zone; it falls inside of a daylight saving gap.
	"""

	def __init__(self, local, zone):
		self.local = local
		self.zone = zone

	def __str__(self):
		return "local time %d does not exist in %r" %(self.local, self.zone)

class InvalidArgumentError(Error, TypeError):
	"""
	# An argument did not provide the capabilities required by the operation.
	"""

def integer(value, limit=integer_limit, isinstance=isinstance):
	"""
	# Validate that &value is representable as an integer and return the &int.

	# Integral numbers, integral floats, and strings of decimal digits with an
	# optional sign are accepted. Booleans and magnitudes beyond &limit are not.

	# [ Exceptions ]
	# /&NotAnIntegerError/
		# When the &value cannot be represented.
	"""
	if isinstance(value, bool):
		raise NotAnIntegerError(value)

	if isinstance(value, numbers.Integral):
		i = int(value)
	elif isinstance(value, float):
		if not value.is_integer():
			raise NotAnIntegerError(value)
		i = int(value)
	elif isinstance(value, str):
		s = value.strip()
		digits = s[1:] if s[:1] in ('+', '-') else s
		if not digits or not digits.isascii() or not digits.isdigit():
			raise NotAnIntegerError(value)
		i = int(s)
	else:
		raise NotAnIntegerError(value)

	if abs(i) > limit:
		raise NotAnIntegerError(value)

	return i
