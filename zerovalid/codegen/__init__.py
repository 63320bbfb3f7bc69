"""Type and struct models, struct matchers, tag handling and settings for describing field extractors."""