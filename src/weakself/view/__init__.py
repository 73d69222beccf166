"""
The VIEW layer: Qt widgets only. Views own their view models and never the
other way round.
"""
