"""Shared fixtures: an excerpt of the Public Suffix List.

The excerpt carries every rule exercised by Mozilla's public test
vectors (publicsuffix.org/list/test_psl.txt), a few private-section
entries and some surrounding comment noise.
"""
from __future__ import annotations

import pytest

from publicsuffix_lite import PublicSuffixList

PSL_EXCERPT = """\
// This Source Code Form is subject to the terms of the Mozilla Public
// License, v. 2.0. If a copy of the MPL was not distributed with this
// file, You can obtain one at https://mozilla.org/MPL/2.0/.

// ===BEGIN ICANN DOMAINS===

// ac : http://nic.ac/rules.htm
ac
com.ac

// biz : https://en.wikipedia.org/wiki/.biz
biz

// cn : https://en.wikipedia.org/wiki/.cn
cn
com.cn
公司.cn

// ck : https://en.wikipedia.org/wiki/.ck
*.ck
!www.ck

// com : https://en.wikipedia.org/wiki/.com
com

// er : https://en.wikipedia.org/wiki/.er
er
*.er

// jp : https://en.wikipedia.org/wiki/.jp
jp
ac.jp
kyoto.jp
ide.kyoto.jp
*.kobe.jp
!city.kobe.jp

// mm : https://en.wikipedia.org/wiki/.mm
*.mm

// uk : https://en.wikipedia.org/wiki/.uk
uk
co.uk
*.sch.uk

// us : https://en.wikipedia.org/wiki/.us
us
ak.us
k12.ak.us

// xn--fiqs8s ("Zhongguo/China", Chinese, Simplified)
中国

// ===END ICANN DOMAINS===
// ===BEGIN PRIVATE DOMAINS===

// Google, Inc.
blogspot.com

// GitHub, Inc.
github.io

// CentralNic : http://www.centralnic.com/
uk.com

// ===END PRIVATE DOMAINS===
"""


@pytest.fixture
def psl_text() -> str:
    return PSL_EXCERPT


@pytest.fixture
def psl() -> PublicSuffixList:
    return PublicSuffixList.parse(PSL_EXCERPT)
