"""Layout constants and the dragon art template."""

from __future__ import annotations

SLOT_CAPACITY = 8
"""Characters of a side dish that fit in one slot."""

SLOT_WIDTH = 20
"""Column width each slot is centered into before substitution."""

CAPTION_WIDTH = 60

DEFAULT_INTERVAL_MS = 1000
MIN_INTERVAL_MS = 10

FALLBACK_TERMINAL_WIDTH = 79

SLOT_MARKERS = ("$line1$", "$line2$")

DRAGON_TEMPLATE = """\
                                          ,. ､
                                        く  r',ゝ
r'￣￣￣￣￣￣￣￣￣ヽ                   ,ゝｰ'､
|                    |          ､      ／      ヽ.
|                    |        く、｀ヽ/  ∩       |
|$line1$ ＞        ｀＞             |
|$line2$|         く´ , -'7         レ个ー─┐
|                    |          ｀´   //  /      ー个ー─'7
|                    |               //  /         |    (
ゝ＿＿＿＿＿＿＿＿__ノ              //  /'┤      |ヽv'⌒ヽ､ゝ
                                   くﾉ  lｰ┤       ヽ.
                                    ｀^^'ｰ┤          ▽_
                                    ((    )          ヽ乙_
                                    ((    )ヽ､          ヽレl
                                    ≧＿_ゝ    ｀ﾞー-=､.＿_,ゝ
"""

DRAGON_HEIGHT = len(DRAGON_TEMPLATE.splitlines())
