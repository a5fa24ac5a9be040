#!/usr/bin/env python

import timeit
from setuptools import setup, Command

class Speed(Command):
    description = "run speed benchmarks"
    user_options = []
    boolean_options = []
    def initialize_options(self):
        pass
    def finalize_options(self):
        pass
    def run(self):
        def do(setup_statements, statement):
            t = timeit.Timer(stmt=statement,
                             setup="\n".join(setup_statements))
            # determine number so that 0.2 <= total time < 2.0
            for i in range(0, 10):
                number = 10**i
                x = t.timeit(number)
                if x >= 0.2:
                    break
            return x / number

        def abbrev(t):
            if t > 1.0:
                return "%.3fs" % t
            if t > 1e-3:
                return "%.1fms" % (t*1e3)
            return "%.1fus" % (t*1e6)

        for params in ["Params1024Sha1", "Params2048Sha256",
                       "Params3072Sha256", "Params4096Sha256"]:
            S1 = ("from srpclient import SRPClient\n"
                  "from srpclient.parameters.rfc5054 import %s" % params)
            S2 = "c = SRPClient('alice', 'password', params=%s)" % params
            S3 = "salt, v = c.register()"
            S4 = "B = v"
            S5 = "ch = c.exchange(B)"

            register = do([S1, S2], S3)
            exchange = do([S1, S2, S3, S4], S5)
            print("%-17s: register=%6s, exchange=%6s"
                  % (params, abbrev(register), abbrev(exchange)))

setup(name="srpclient",
      version="0.1.0",
      description="SRP-6a (RFC 5054) client-side key exchange (pure python)",
      package_dir={"": "src"},
      packages=["srpclient", "srpclient.parameters", "srpclient.test"],
      license="MIT",
      cmdclass={"speed": Speed},
      python_requires=">=3.7",
      classifiers=[
          "Intended Audience :: Developers",
          "License :: OSI Approved :: MIT License",
          "Programming Language :: Python",
          "Programming Language :: Python :: 3",
          "Topic :: Security :: Cryptography",
          ],
      install_requires=["hkdf"],
      extras_require={"test": ["pytest"]},
      )
