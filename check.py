#!/usr/bin/env python

from pylint import lint

lint.Run(['src/taintfilter', 'tests'])
