"""Small memory, character, string, conversion, output and printf helpers."""