import hypothesis.strategies as st

keys = st.text(
    alphabet=st.characters(categories=("L", "N"), include_characters="_-."),
    min_size=1,
    max_size=10,
)

# Printable characters, never whitespace and never '<' so
# generated values can not contain text block markers.
words = st.text(
    alphabet=st.characters(categories=("L", "N", "P", "S"), exclude_characters="<"),
    min_size=1,
    max_size=10,
)

inline_values = st.builds(" ".join, st.lists(words, max_size=4))

horizontal_whitespace = st.text(alphabet=" \t", max_size=3)

text_lines = st.text(
    alphabet=st.characters(
        categories=("L", "N", "P", "S", "Zs"), exclude_characters="<"
    ),
    max_size=15,
)

text_values = st.builds("\n".join, st.lists(text_lines, max_size=5))

comments = st.builds(lambda c: "#" + c, text_lines)

newlines = st.sampled_from(["\n", "\r\n"])


@st.composite
def inline_pairs(draw):
    key = draw(keys)
    value = draw(inline_values)
    line = (
        key
        + draw(horizontal_whitespace)
        + ":"
        + draw(horizontal_whitespace)
        + value
        + draw(horizontal_whitespace)
    )
    return line, (key, value)


@st.composite
def text_pairs(draw):
    key = draw(keys)
    value = draw(text_values)
    suffix = draw(st.one_of(horizontal_whitespace, comments))
    line = key + ":" + draw(horizontal_whitespace)
    line += "<text>\n" + value + "\n</text>" + suffix
    return line, (key, value)


skipped_lines = st.one_of(horizontal_whitespace, comments)


@st.composite
def tag_documents(draw):
    """
    Generates the contents of a tag document together with the
    pairs it contains.
    """
    entries = draw(
        st.lists(
            st.one_of(
                inline_pairs(),
                text_pairs(),
                st.builds(lambda s: (s, None), skipped_lines),
            ),
            max_size=8,
        )
    )
    contents = ""
    pairs = []
    for line, pair in entries:
        contents += line + draw(newlines)
        if pair is not None:
            pairs.append(pair)
    if contents and draw(st.booleans()):
        contents = contents.rstrip("\r\n")
    return contents, pairs
