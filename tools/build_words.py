# tools/build_words.py
# Regenerates the bundled word list from wordfreq's frequency ranking.
import argparse
import os

from wordle_term.words import frequent_words

OUTPUT = os.path.join(os.path.dirname(__file__), "..", "src", "wordle_term", "words.txt")

parser = argparse.ArgumentParser(description="Write the 5-letter words of a wordfreq list")
parser.add_argument("--lang", default="en")
parser.add_argument("--top", type=int, default=30000, help="how many frequent words to scan")
parser.add_argument("--limit", type=int, default=2000, help="max words to keep")
parser.add_argument("-o", "--output", default=OUTPUT)
args = parser.parse_args()

words = frequent_words(args.lang, args.top)[: args.limit]

os.makedirs(os.path.dirname(os.path.abspath(args.output)), exist_ok=True)
with open(args.output, "w", encoding="utf-8") as fout:
    for w in words:
        fout.write(w.lower() + "\n")

print(f"Words written (5 letters): {len(words)}")
print(f"Saved to: {os.path.abspath(args.output)}")
