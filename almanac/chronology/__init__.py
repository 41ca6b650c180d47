"""
[ About ]
---------

chronology decomposes millisecond instants into proleptic Gregorian calendar
fields and composes them back. Instants are plain &int counts of milliseconds
since 1970-01-01T00:00:00.000 UTC; a time zone maps them onto local time.

The surface functionality is provided by &.calendar:

#!/pl/python
	from almanac.chronology import calendar, zone

	c = calendar.Calendar(0, zone.utc)
	c.with_date(2020, 2, 29).plus_years(1)
	assert (c.get_year(), c.get_month(), c.get_day_of_month()) == (2021, 2, 28)

[ Modules ]
-----------

/&.core/
	Units, errors, and integer validation.
/&.gregorian/
	Calendar arithmetic on days and years.
/&.week/
	Days of the week and week arithmetic.
/&.zone/
	The time zone capability and transition table zones.
/&.fields/
	The calendar fields that derive values from local instants.
/&.calendar/
	The mutable &.calendar.Calendar.
/&.codes/
	Numeric field identifiers.
/&.format/
	Pattern based formatting.
/&.system/
	Clock access and default contexts.
"""
