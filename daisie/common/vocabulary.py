"""Recode tables mapping DAISIE values to Darwin Core and ISO vocabularies.

Each table is assumed to be exhaustive over the values observed in the DAISIE
export.  Keys are compared case-insensitively after trimming whitespace.  A
value mapped to an empty string is deliberately left without a code.
"""

# .............................................................................
# Country, island group or sea-region name in DAISIE -> ISO 3166-1 alpha-2.
# Islands and subnational regions map to the sovereign state.
COUNTRY_CODES = {
    "Åland": "AX",
    "Aland": "AX",
    "Albania": "AL",
    "Algeria": "DZ",
    "Andorra": "AD",
    "Armenia": "AM",
    "Austria": "AT",
    "Azerbaijan": "AZ",
    "Azores": "PT",
    "Balearic Islands": "ES",
    "Belarus": "BY",
    "Belgium": "BE",
    "Bosnia and Herzegovina": "BA",
    "Bulgaria": "BG",
    "Canary Islands": "ES",
    "Corsica": "FR",
    "Crete": "GR",
    "Croatia": "HR",
    "Cyprus": "CY",
    "Czech Republic": "CZ",
    "Czechia": "CZ",
    "Denmark": "DK",
    "Egypt": "EG",
    "England": "GB",
    "Estonia": "EE",
    "Europe": "",
    "European Russia": "RU",
    "European Turkey": "TR",
    "Faroe Islands": "FO",
    "Finland": "FI",
    "France": "FR",
    "Georgia": "GE",
    "Germany": "DE",
    "Gibraltar": "GI",
    "Great Britain": "GB",
    "Greece": "GR",
    "Greenland": "GL",
    "Guernsey": "GG",
    "Hungary": "HU",
    "Iceland": "IS",
    "Ireland": "IE",
    "Isle of Man": "IM",
    "Israel": "IL",
    "Italy": "IT",
    "Jersey": "JE",
    "Kaliningrad": "RU",
    "Kosovo": "XK",
    "Latvia": "LV",
    "Lebanon": "LB",
    "Libya": "LY",
    "Liechtenstein": "LI",
    "Lithuania": "LT",
    "Luxembourg": "LU",
    "Macedonia": "MK",
    "Madeira": "PT",
    "Malta": "MT",
    "Moldova": "MD",
    "Monaco": "MC",
    "Montenegro": "ME",
    "Morocco": "MA",
    "Netherlands": "NL",
    "North Macedonia": "MK",
    "Northern Ireland": "GB",
    "Norway": "NO",
    "Poland": "PL",
    "Portugal": "PT",
    "Romania": "RO",
    "Russia": "RU",
    "San Marino": "SM",
    "Sardinia": "IT",
    "Scotland": "GB",
    "Selvagens": "PT",
    "Serbia": "RS",
    "Sicily": "IT",
    "Slovakia": "SK",
    "Slovenia": "SI",
    "Spain": "ES",
    "Svalbard": "SJ",
    "Sweden": "SE",
    "Switzerland": "CH",
    "Syria": "SY",
    "Tunisia": "TN",
    "Turkey": "TR",
    "Ukraine": "UA",
    "United Kingdom": "GB",
    "Vatican City": "VA",
    "Wales": "GB",
}

# .............................................................................
# Language name -> ISO 639-1
LANGUAGE_CODES = {
    "Albanian": "sq",
    "Arabic": "ar",
    "Armenian": "hy",
    "Basque": "eu",
    "Belarusian": "be",
    "Bosnian": "bs",
    "Breton": "br",
    "Bulgarian": "bg",
    "Catalan": "ca",
    "Corsican": "co",
    "Croatian": "hr",
    "Czech": "cs",
    "Danish": "da",
    "Dutch": "nl",
    "English": "en",
    "Estonian": "et",
    "Faroese": "fo",
    "Finnish": "fi",
    "Flemish": "nl",
    "French": "fr",
    "Frisian": "fy",
    "Galician": "gl",
    "Georgian": "ka",
    "German": "de",
    "Greek": "el",
    "Hebrew": "he",
    "Hungarian": "hu",
    "Icelandic": "is",
    "Irish": "ga",
    "Italian": "it",
    "Latin": "la",
    "Latvian": "lv",
    "Lithuanian": "lt",
    "Luxembourgish": "lb",
    "Macedonian": "mk",
    "Maltese": "mt",
    "Norwegian": "no",
    "Occitan": "oc",
    "Polish": "pl",
    "Portuguese": "pt",
    "Romanian": "ro",
    "Romansh": "rm",
    "Russian": "ru",
    "Sami": "se",
    "Sardinian": "sc",
    "Scottish Gaelic": "gd",
    "Serbian": "sr",
    "Serbo-Croatian": "sh",
    "Slovak": "sk",
    "Slovene": "sl",
    "Slovenian": "sl",
    "Spanish": "es",
    "Swedish": "sv",
    "Turkish": "tr",
    "Ukrainian": "uk",
    "Welsh": "cy",
}

# .............................................................................
# DAISIE abundance -> Darwin Core occurrenceStatus
ABSENT_ABUNDANCE = "Absent or extinct"
EXTINCT_POPULATION = "Extinct"
OCCURRENCE_STATUS = {
    "Abundant": "common",
    "Absent or extinct": "absent",
    "Common": "common",
    "Frequent": "common",
    "Locally common": "common",
    "Occasional": "rare",
    "Present": "present",
    "Rare": "rare",
    "Scattered": "present",
    "Sporadic": "irregular",
    "Unknown": "present",
    "Very rare": "rare",
}

# .............................................................................
# DAISIE population status -> Darwin Core establishmentMeans
ESTABLISHMENT_MEANS = {
    "Captive": "managed",
    "Casual": "introduced",
    "Cultivated": "managed",
    "Established": "naturalised",
    "Extinct": "introduced",
    "Invasive": "invasive",
    "Naturalised": "naturalised",
    "Not established": "introduced",
    "Unknown": "uncertain",
}

# .............................................................................
# GBIF name parser rankMarker -> Darwin Core taxonRank
RANK_MARKERS = {
    "agg.": "speciesAggregate",
    "cv.": "cultivar",
    "f.": "form",
    "gen.": "genus",
    "infrasp.": "infraspecificname",
    "sp.": "species",
    "ssp.": "subspecies",
    "subf.": "subform",
    "subsp.": "subspecies",
    "subvar.": "subvariety",
    "var.": "variety",
}

# .............................................................................
# Taxa recorded twice in DAISIE under different identifiers, found by manual
# curation of the taxon table.  {duplicate idspecies: retained idspecies}
DUPLICATE_TAXA = {
    "10195": "10194",
    "10538": "10537",
    "11246": "2815",
    "12069": "12068",
    "13482": "13481",
    "15367": "6227",
    "17214": "17213",
    "50128": "50127",
    "53004": "4093",
    "54671": "54670",
    "55113": "8839",
    "57840": "57839",
}
