"""Catalog of SSML example documents, one per demonstrated element.

The catalog is rendered once at import and is read-only afterwards, so it can
be shared by any number of concurrent requests.
"""

from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from ssml import render

# (topic, template, dynamic values)
ExampleEntry = Tuple[str, str, Mapping[str, Any]]

EXAMPLES: Tuple[ExampleEntry, ...] = (
    ("break", """
        <speak>
          Step 1, take a deep breath. <break time="200ms" strength="weak"/>
          Step 2, exhale.
        </speak>
    """, {}),
    ("say-as", """
        <speak>
          This interprets "12345" normally.
          This interprets "<say-as interpret-as="cardinal">12345</say-as>" as a cardinal.
          This interprets "1" normally.
          This interprets "<say-as interpret-as="ordinal">1</say-as>" as an ordinal.
          This interprets "can" normally.
          This interprets "<say-as interpret-as="characters">can</say-as>" as characters.
          This interprets "5+1/2" normally.
          This interprets "<say-as interpret-as="fraction">5+1/2</say-as>" as a fraction.
          This interprets "censored" normally.
          This interprets "<say-as interpret-as="expletive">censored</say-as>" as an expletive.
          This interprets "10 foot" normally.
          This interprets "<say-as interpret-as="unit">10 foot</say-as>" as a unit.
          This interprets "abcdefg" normally.
          This interprets "<say-as interpret-as="verbatim">abcdefg</say-as>" as verbatim.
          This interprets "1960-09-10" normally.
          This interprets "<say-as interpret-as="date" format="ymd">1960-09-10</say-as>" as a date.
          This interprets "2:30pm" normally.
          This interprets "<say-as interpret-as="time" format="hms12">2:30pm</say-as>" as a time.
          This interprets "(781) 771-7777" normally.
          This interprets "<say-as interpret-as="telephone" format="1">
            (781) 771-7777
          </say-as>" as a telephone number.
        </speak>
    """, {}),
    ("audio", """
        <speak>
          <audio src="https://actions.google.com/sounds/v1/animals/cat_purr_close.ogg">
            <desc>Sound of a cat purring.</desc>
            Audio resource for a cat purring failed to load.
          </audio>
        </speak>
    """, {}),
    ("paragraph", """
        <speak>
          <p>
            <s>This is sentence one.</s>
            <s>This is sentence two.</s>
          </p>
        </speak>
    """, {}),
    ("sub", """
        <speak>
          This is speaking "W3C" normally.
          This is speaking "<sub alias="World Wide Web Consortium">W3C</sub>" using the sub tag.
        </speak>
    """, {}),
    ("prosody", """
        <speak>
          <prosody rate="100%" pitch="-2st">
            My name is <prosody rate="slow">Wonder Woman</prosody>.
          </prosody>
          <break time="0.5s" />
          <prosody pitch="+20st">Hi, my name is lowly worm.</prosody>
          <prosody pitch="-10st">Hi, my name is huckleberry cat.</prosody>
          <break time="1.5s" />Was that fun?
          <prosody rate="x-fast">Hi I'm speaking fast.</prosody>
          <prosody rate="x-slow">I'm speaking slow.</prosody>
          <prosody volume="soft">I'm speaking softly.</prosody>
          <prosody volume="x-loud">I'm speaking loud</prosody>
          <prosody pitch="+20st">I'm speaking high.</prosody>
          <prosody pitch="-20st">I'm speaking deep.</prosody>
        </speak>
    """, {}),
    ("emphasis", """
        <speak>
          I would like to emphasize the importance of SSML.
          I told you to pick up those toys an hour ago.
          <emphasis>I told you to pick up those toys an hour ago.</emphasis>
          <emphasis level="strong">I told you to pick up those toys an hour ago.</emphasis>
          <emphasis level="moderate">I told you to pick up those toys an hour ago.</emphasis>
          <emphasis level="reduced">I told you to pick up those toys an hour ago.</emphasis>
          <emphasis level="none">I told you to pick up those toys an hour ago.</emphasis>
        </speak>
    """, {}),
    ("speed", """
        <speak>
          This is without prosody.
          <prosody rate="100%">This is speaking at 100% rate.</prosody>
          <prosody rate="150%">This is speaking at 150% rate.</prosody>
          <prosody rate="foo">This is speaking at normal rate.</prosody>
          <prosody rate="200%">This is speaking at 200% rate.</prosody>
          <prosody rate="medium">This is speaking at medium rate.</prosody>
          <prosody rate="300%">This is speaking at 300% rate.</prosody>
          <prosody rate="default">This is speaking at default rate.</prosody>
          <prosody rate="75%">This is speaking at 75% rate.</prosody>
          <prosody rate="50%">This is speaking at 50% rate.</prosody>
          <prosody rate="25%">This is speaking at 25% rate.</prosody>
          <prosody rate="10%">This is speaking at 10% rate.</prosody>
        </speak>
    """, {}),
    ("volume", """
        <speak>
          This is without prosody.
          <prosody volume="+5dB">This is speaking at +5dB volume.</prosody>
          <prosody volume="100%">This is speaking at 100% volume.</prosody>
          <prosody volume="loud">This is speaking at loud volume.</prosody>
          <prosody volume="foo">This is speaking at normal volume.</prosody>
          <prosody volume="+10dB">This is speaking at +10dB volume.</prosody>
          <prosody volume="medium">This is speaking at medium volume.</prosody>
          <prosody volume="x-loud">This is speaking at x-loud volume.</prosody>
          <prosody volume="default">This is speaking at default volume.</prosody>
          <prosody volume="-5dB">This is speaking at -5dB volume.</prosody>
          <prosody volume="-10dB">This is speaking at -10dB volume.</prosody>
          <prosody volume="soft">This is speaking at soft volume.</prosody>
          <prosody volume="x-soft">This is speaking at x-soft volume.</prosody>
        </speak>
    """, {}),
    ("pitch", """
        <speak>
          This is without prosody.
          <prosody pitch="+6st">This is speaking at +6 semitones pitch.</prosody>
          <prosody pitch="foo">This is speaking at normal pitch.</prosody>
          <prosody pitch="high">This is speaking at high pitch.</prosody>
          <prosody pitch="+0st">This is speaking at +0 semitones pitch.</prosody>
          <prosody pitch="medium">This is speaking at medium pitch.</prosody>
          <prosody pitch="default">This is speaking at default pitch.</prosody>
          <prosody pitch="+200%">This is speaking at +200% pitch.</prosody>
          <prosody pitch="+12st">This is speaking at +12 semitones pitch.</prosody>
          <prosody pitch="x-high">This is speaking at x-high pitch.</prosody>
          <prosody pitch="-6st">This is speaking at -6 semitones pitch.</prosody>
          <prosody pitch="low">This is speaking at low pitch.</prosody>
          <prosody pitch="-12st">This is speaking at -12 semitones pitch.</prosody>
          <prosody pitch="x-low">This is speaking at x-low pitch.</prosody>
        </speak>
    """, {}),
)


def build_catalog(entries: Iterable[ExampleEntry]) -> Mapping[str, str]:
    """Render ``entries`` into a read-only topic -> document mapping."""
    documents: Dict[str, str] = {}
    for topic, template, values in entries:
        if topic in documents:
            raise ValueError(f"Duplicate example topic: {topic!r}")
        documents[topic] = render(template, **values)
    return MappingProxyType(documents)


CATALOG: Mapping[str, str] = build_catalog(EXAMPLES)


def lookup(topic: str) -> Optional[str]:
    return CATALOG.get(topic)


def topics() -> Tuple[str, ...]:
    """Topic names in catalog order."""
    return tuple(CATALOG)
