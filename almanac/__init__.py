"""
# Calendar projects.

# /chronology/
	# Instant and calendar field arithmetic over the proleptic Gregorian calendar.
# /test/
	# Contention harness used by the projects' test modules.
"""
