identity = 'http://almanac.dev/project/python/almanac.chronology'
name = 'chronology'
abstract = 'Millisecond instants decomposed into mutable Gregorian calendar fields.'
icon = '📅'
study = 'horology'

controller = 'almanac.dev'
contact = 'mailto:maintainers@almanac.dev'

version_info = (0, 1, 0)
version = '.'.join(map(str, version_info))
