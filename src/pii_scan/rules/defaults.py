"""Built-in detection rules.

Column names are compared after normalization (lowercased, separators
removed), so a single synonym list covers under_score and camelCase. There
are no name rules for email or IP addresses since values detect them
reliably.
"""

from __future__ import annotations

from pii_scan.models import MultiNameRule, NameRule, RegexRule, TokenRule

NAME_RULES: tuple[NameRule, ...] = (
    NameRule(name="surname", display_name="last names", column_names=["lastname", "lname", "surname"]),
    NameRule(name="phone", display_name="phone numbers", column_names=["phone", "phonenumber"]),
    NameRule(name="date_of_birth", display_name="dates of birth", column_names=["dateofbirth", "birthday", "dob"]),
    NameRule(name="postal_code", display_name="postal codes", column_names=["zip", "zipcode", "postalcode"]),
    NameRule(name="oauth_token", display_name="OAuth tokens", column_names=["accesstoken", "refreshtoken"]),
)

MULTI_NAME_RULES: tuple[MultiNameRule, ...] = (
    MultiNameRule(
        name="location",
        display_name="location data",
        column_names=[["latitude", "lat"], ["longitude", "lon", "lng"]],
    ),
)

# Delimiters also match their URL-encoded forms (%40, %3A, %2B) for values taken from request logs
REGEX_RULES: tuple[RegexRule, ...] = (
    RegexRule(
        name="email",
        display_name="emails",
        pattern=r"\b\w[\w+.-]+(?:@|%40)[a-z\d-]+(?:\.[a-z\d-]+)*\.[a-z]+\b",
    ),
    RegexRule(
        name="ip",
        display_name="IP addresses",
        pattern=r"\b\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}\b",
    ),
    RegexRule(
        name="credit_card",
        display_name="credit card numbers",
        pattern=r"\b[3456]\d{3}[\s+-]\d{4}[\s+-]\d{4}[\s+-]\d{4}\b|\b[3456]\d{15}\b",
    ),
    RegexRule(
        name="phone",
        display_name="phone numbers",
        pattern=r"\b(?:\+\d{1,2}\s)?\(?\d{3}\)?[\s+.-]\d{3}[\s+.-]\d{4}\b|(?:\+|%2B)[1-9]\d{6,14}\b",
    ),
    RegexRule(
        name="ssn",
        display_name="SSNs",
        pattern=r"\b\d{3}[\s+-]\d{2}[\s+-]\d{4}\b",
    ),
    RegexRule(
        name="street",
        display_name="street addresses",
        pattern=r"(?i)\b\d+\b.{4,60}\b(?:st|street|ave|avenue|road|rd|drive|dr)\b",
    ),
    # Google
    RegexRule(
        name="oauth_token",
        display_name="OAuth tokens",
        pattern=r"ya29\..{60,200}",
    ),
    RegexRule(
        name="mac",
        display_name="MAC addresses",
        pattern=r"\b[0-9a-fA-F]{2}(?:(?::|%3A)[0-9a-fA-F]{2}){5}\b",
    ),
)

# First 300 surnames of the 2010 US Census, about 30% cumulative frequency
LAST_NAMES: frozenset[str] = frozenset(
    {
        "smith", "johnson", "williams", "brown", "jones", "garcia", "miller", "davis", "rodriguez", "martinez",
        "hernandez", "lopez", "gonzalez", "wilson", "anderson", "thomas", "taylor", "moore", "jackson", "martin",
        "lee", "perez", "thompson", "white", "harris", "sanchez", "clark", "ramirez", "lewis", "robinson",
        "walker", "young", "allen", "king", "wright", "scott", "torres", "nguyen", "hill", "flores",
        "green", "adams", "nelson", "baker", "hall", "rivera", "campbell", "mitchell", "carter", "roberts",
        "gomez", "phillips", "evans", "turner", "diaz", "parker", "cruz", "edwards", "collins", "reyes",
        "stewart", "morris", "morales", "murphy", "cook", "rogers", "gutierrez", "ortiz", "morgan", "cooper",
        "peterson", "bailey", "reed", "kelly", "howard", "ramos", "kim", "cox", "ward", "richardson",
        "watson", "brooks", "chavez", "wood", "james", "bennett", "gray", "mendoza", "ruiz", "hughes",
        "price", "alvarez", "castillo", "sanders", "patel", "myers", "long", "ross", "foster", "jimenez",
        "powell", "jenkins", "perry", "russell", "sullivan", "bell", "coleman", "butler", "henderson", "barnes",
        "gonzales", "fisher", "vasquez", "simmons", "romero", "jordan", "patterson", "alexander", "hamilton", "graham",
        "reynolds", "griffin", "wallace", "moreno", "west", "cole", "hayes", "bryant", "herrera", "gibson",
        "ellis", "tran", "medina", "aguilar", "stevens", "murray", "ford", "castro", "marshall", "owens",
        "harrison", "fernandez", "mcdonald", "woods", "washington", "kennedy", "wells", "vargas", "henry", "chen",
        "freeman", "webb", "tucker", "guzman", "burns", "crawford", "olson", "simpson", "porter", "hunter",
        "gordon", "mendez", "silva", "shaw", "snyder", "mason", "dixon", "munoz", "hunt", "hicks",
        "holmes", "palmer", "wagner", "black", "robertson", "boyd", "rose", "stone", "salazar", "fox",
        "warren", "mills", "meyer", "rice", "schmidt", "garza", "daniels", "ferguson", "nichols", "stephens",
        "soto", "weaver", "ryan", "gardner", "payne", "grant", "dunn", "kelley", "spencer", "hawkins",
        "arnold", "pierce", "vazquez", "hansen", "peters", "santos", "hart", "bradley", "knight", "elliott",
        "cunningham", "duncan", "armstrong", "hudson", "carroll", "lane", "riley", "andrews", "alvarado", "ray",
        "delgado", "berry", "perkins", "hoffman", "johnston", "matthews", "pena", "richards", "contreras", "willis",
        "carpenter", "lawrence", "sandoval", "guerrero", "george", "chapman", "rios", "estrada", "ortega", "watkins",
        "greene", "nunez", "wheeler", "valdez", "harper", "burke", "larson", "santiago", "maldonado", "morrison",
        "franklin", "carlson", "austin", "dominguez", "carr", "lawson", "jacobs", "obrien", "lynch", "singh",
        "vega", "bishop", "montgomery", "oliver", "jensen", "harvey", "williamson", "gilbert", "dean", "sims",
        "espinoza", "howell", "li", "wong", "reid", "hanson", "le", "mccoy", "garrett", "burton",
        "fuller", "wang", "weber", "welch", "rojas", "lucas", "marquez", "fields", "park", "yang",
        "little", "banks", "padilla", "day", "walsh", "bowman", "schultz", "luna", "fowler", "mejia",
    }
)

TOKEN_RULES: tuple[TokenRule, ...] = (TokenRule(name="surname", display_name="last names", tokens=LAST_NAMES),)
