"""
# Test framework primitives. Provides and defines &Test, &Contention, &Absurdity, and &Fate.

# Test modules define functions prefixed with `test_` that accept a single &Test
# instance. The functions are dispatched by &execute when a module is ran directly,
# and by pytest through the `test` fixture defined by the project's `conftest.py`.
"""
import builtins
import operator
import functools
import contextlib

def get_test_index(tester, int=int, AttributeError=AttributeError):
	"""
	# Returns the first line number of the underlying code object.
	"""
	tester = getattr(tester, '__wrapped__', tester)

	try:
		return int(tester.__code__.co_firstlineno)
	except AttributeError:
		return None

def test_order(kv):
	"""
	# Key function used by &gather to order tests by their position in the module.
	"""
	return get_test_index(kv[1]) or 0

def gather(container, prefix='test_', key=test_order, getattr=getattr):
	"""
	# Collect the objects in the &container whose name starts with &prefix.

	# Returns a list of identifier-subject pairs ordered by &key.
	"""
	tests = [
		('#'.join((container.__name__, name)), getattr(container, name))
		for name in dir(container)
		if name.startswith(prefix)
	]
	tests.sort(key=key)

	return tests

class Absurdity(Exception):
	"""
	# Exception raised by &Contention instances designating a failed assertion.
	"""

	# for re-constituting the expression
	operator_names_mapping = {
		'__eq__': '==',
		'__ne__': '!=',
		'__lt__': '<',
		'__gt__': '>',
		'__le__': '<=',
		'__ge__': '>=',
		'__mod__': 'is',
	}

	def __init__(self, operator, former, latter, inverse=None):
		self.operator = operator
		self.former = former
		self.latter = latter
		self.inverse = inverse

	def __str__(self):
		opchars = self.operator_names_mapping.get(self.operator, self.operator)
		prefix = ('not ' if self.inverse else '')
		return prefix + ' '.join((repr(self.former), opchars, repr(self.latter)))

	def __repr__(self):
		return '{0}({1!r}, {2!r}, {3!r}, inverse={4!r})'.format(
			self.__class__.__name__, self.operator, self.former, self.latter, self.inverse
		)

class Contention(object):
	"""
	# Contentions are objects used by &Test objects to provide assertions.
	# Contention instances are made by the true division operator of
	# &Test instances passed into test functions.

	#!python
		def test_year(test):
			test/calendar.get_year() == 1970

	# All of the comparison operations are supported and are passed on to the
	# underlying objects being examined. Floor division produces an inverted contention.
	"""
	__slots__ = ('test', 'object', 'storage', 'inverse')

	def __init__(self, test, object, inverse=False):
		self.test = test
		self.object = object
		self.inverse = inverse

	_override = {
		'__mod__' : ('__mod__', lambda x,y: x is y)
	}

	for k in ('__eq__', '__ne__', '__lt__', '__gt__', '__le__', '__ge__', '__mod__'):
		if k in _override:
			opname, v = _override[k]
		else:
			opname, v = k, getattr(operator, k)

		def check(self, ob, opname=opname, operator=v):
			x, y = self.object, ob
			if self.inverse:
				if operator(x, y): raise self.test.Absurdity(opname, x, y, inverse=True)
			else:
				if not operator(x, y): raise self.test.Absurdity(opname, x, y, inverse=False)
		locals()[k] = check
	del k, v, opname, check
	__hash__ = None

	##
	# Context manager exception traps.

	def __enter__(self, partial=functools.partial):
		return partial(getattr, self, 'storage', None)

	def __exit__(self, typ, val, tb):
		test, x = self.test, self.object
		y = self.storage = val
		if isinstance(y, test.Fate):
			# Don't trap test Fates.
			return

		if not isinstance(y, x): raise self.test.Absurdity("isinstance", x, y)
		return True # Inhibiting raise.

	def __xor__(self, subject):
		"""
		# Contend that the &subject raises the given exception when it is called.

		#!python
			test/core.RangeError ^ (lambda: field.set(13))
		"""
		with self as exc:
			subject()
		return exc()
	__rxor__ = __xor__

class Fate(BaseException):
	"""
	# The Fate of a test. &Test.seal uses &Fate exceptions to describe the result of a test.
	"""
	name = 'fate'
	impact = None
	line = None

	def __init__(self, content):
		self.content = content

	@property
	def negative(self):
		"""
		# Whether the fate's effect should be considered undesirable.
		"""
		return self.impact < 0

class Return(Fate):
	abstract = "The test returned &None implying success."
	impact = 1
	name = "return"

class Fail(Fate):
	abstract = "The test raised an exception or contended an absurdity."
	impact = -1
	name = "fail"

class Test(object):
	"""
	# An object that manages an individual test and its execution.
	# Provides interfaces for constructing and checking &Contention's using
	# a simple syntax.

	# [ Properties ]
	# /identity/
		# A unique identifier for the &Test.
	# /subject/
		# The callable that performs a series of checks using the &Test instance.
	# /fate/
		# The conclusion of the Test. An instance of &Fate.
	# /exits/
		# A &contextlib.ExitStack for cleaning up allocations made during the test.
		# The harness running the test decides when the stack's exit is processed.
	"""
	__slots__ = ('identity', 'subject', 'fate', 'exits',)

	Absurdity = Absurdity
	Contention = Contention
	Fate = Fate
	Fail = Fail

	def __init__(self, identity, subject, ExitStack=contextlib.ExitStack):
		self.identity = identity
		self.subject = subject
		self.exits = ExitStack()

	def __truediv__(self, object):
		return self.Contention(self, object)

	def __rtruediv__(self, object):
		return self.Contention(self, object)

	def __floordiv__(self, object):
		return self.Contention(self, object, True)

	def __rfloordiv__(self, object):
		return self.Contention(self, object, True)

	def isinstance(self, *args):
		if not builtins.isinstance(*args):
			raise self.Absurdity("isinstance", *args, inverse=True)

	def issubclass(self, *args):
		if not builtins.issubclass(*args):
			raise self.Absurdity("issubclass", *args, inverse=True)

	def seal(self, isinstance=builtins.isinstance):
		"""
		# Seal the fate of the Test by executing the subject-callable with the Test
		# instance as the only parameter.

		# Exceptions are trapped and assigned to the &fate attribute.
		"""
		tb = None
		if hasattr(self, 'fate'):
			raise RuntimeError("test has already been sealed")

		try:
			self.subject(self)
			self.fate = Return(None)
		except Fate as fate:
			tb = fate.__traceback__.tb_next
			self.fate = fate
		except Exception as err:
			tb = err.__traceback__.tb_next
			self.fate = self.Fail('test raised exception')
			self.fate.__cause__ = err

		if tb is not None:
			self.fate.line = tb.tb_lineno

def execute(module):
	"""
	# Resolve the fate of the tests contained in &module. No status information
	# is printed and the exception of the first failure will be raised.
	"""
	for id, func in gather(module):
		test = Test(id, func)
		with test.exits:
			test.seal()
		if test.fate.negative:
			raise test.fate
