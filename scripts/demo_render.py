#!/usr/bin/env python3
"""
Demo script showing the rendering pipeline in action
"""

from app.config import ConfigKey
from app.core.logging import configure_logging
from app.core.site_config import site_config
from app.utils.markdown import quote_for_reply, render

configure_logging()

examples = [
    "This is **bold** and *italic* text",
    "Check out https://example.com/page?q=1 for details.",
    "First paragraph\n\nSecond paragraph\nwith a line break",
    "```python\nprint('hello')\n```",
    "Legacy code:\n    x = 1\n    y = 2",
]

print("=" * 80)
print("RENDERING PIPELINE DEMONSTRATION")
print("=" * 80)

for i, example in enumerate(examples, 1):
    print(f"\n[Example {i}]")
    print(f"Input:  {example!r}")
    print(f"HTML:   {render(example)}")

print("\n" + "=" * 80)
print("REPLY QUOTING")
print("=" * 80)

original = "> earlier point\nI disagree"
print(f"\nInput:  {original!r}")
print(quote_for_reply("alice", original))

print("=" * 80)
print("CENSORSHIP")
print("=" * 80)

site_config.set(ConfigKey.CENSORED_WORDS, "darn, heck")
for text in ["Darn it", "What the HECK", "checkout"]:
    print(f"\nInput:  {text!r}")
    print(f"HTML:   {render(text)}")

print("\n" + "=" * 80)
print("SECURITY")
print("=" * 80)

for test_input in ["<script>alert('xss')</script>", "**<img src=x onerror=alert(1)>**"]:
    print(f"\nInput:  {test_input!r}")
    print(f"Output: {render(test_input)}")

print("\n" + "=" * 80)
